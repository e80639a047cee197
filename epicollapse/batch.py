"""
This module contains functions for collapsing many read pairs at once, optionally spread across
multiple processes. Fragments are independent of each other, so they can be collapsed in any
order, but results are always returned in input order.

Copyright 2026 the Epicollapse authors

This file is part of Epicollapse. Epicollapse is free software: you can redistribute it and/or
modify it under the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later version. Epicollapse is
distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied
warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public
License for more details. You should have received a copy of the GNU General Public License along
with Epicollapse. If not, see <http://www.gnu.org/licenses/>.
"""

import collections
import multiprocessing

from .collapse import collapse_pair
from .error import PairingError, FragmentAssemblyError
from .log import log, section_header, explanation, red
from .settings import OUTCOMES


class CollapseSummary(object):

    def __init__(self):
        self.outcome_counts = collections.Counter()
        self.skipped = []

    def __repr__(self):
        counts = ', '.join(f'{o}={self.outcome_counts[o]}' for o in OUTCOMES)
        return f'CollapseSummary({counts}, skipped={len(self.skipped)})'

    def add(self, outcome):
        self.outcome_counts[outcome] += 1

    def add_skipped(self, name, message):
        self.skipped.append((name, message))

    def total(self):
        return sum(self.outcome_counts.values()) + len(self.skipped)

    def log_summary(self):
        width = max(len(o) for o in OUTCOMES)
        log(f'{"fragments:":<{width + 2}}{self.total():,}')
        for outcome in OUTCOMES:
            log(f'  {outcome + ":":<{width + 1}} {self.outcome_counts[outcome]:,}')
        if self.skipped:
            log(red(f'  {"skipped:":<{width + 1}} {len(self.skipped):,}'))
        log()


def collapse_fragments(pairs, threads=1, skip_malformed=False):
    """
    Collapses each read pair in pairs (an iterable of two-record collections) and returns a flat
    list of the output records along with a CollapseSummary.

    If skip_malformed is True, pairs which can't be collapsed are logged and left out of the
    output. Otherwise the first such pair raises its PairingError/FragmentAssemblyError.
    """
    section_header('Collapsing read pairs')
    explanation('Each pair of mates is collapsed into a single fragment so that methylation '
                'calls in the region where the mates overlap are only counted once. Mates on '
                'different chromosomes are passed through unchanged.')
    pairs = [list(p) for p in pairs]
    records, summary = [], CollapseSummary()
    if threads == 1:
        results = map(collapse_one_pair, pairs)
        collect_results(results, pairs, records, summary, skip_malformed)
    else:
        with multiprocessing.Pool(threads) as pool:
            results = pool.imap(collapse_one_pair, pairs)
            collect_results(results, pairs, records, summary, skip_malformed)
    log('\n')
    summary.log_summary()
    return records, summary


def collapse_one_pair(reads):
    """
    Worker function: errors come back as text rather than being raised, as the exception classes
    carry records and can't be rebuilt from their message on the other side of a process pool.
    """
    try:
        outcome, records = collapse_pair(reads)
        return outcome, records, None
    except (PairingError, FragmentAssemblyError) as e:
        return None, [], str(e)


def collect_results(results, pairs, records, summary, skip_malformed):
    for i, (outcome, collapsed, error) in enumerate(results):
        if error is not None:
            if not skip_malformed:
                collapse_pair(pairs[i])  # raises the original exception in this process
            name = pairs[i][0].name if pairs[i] else '?'
            summary.add_skipped(name, error)
            log()
            log(red(f'skipping {name}: {error.splitlines()[0]}'))
        else:
            summary.add(outcome)
            records += collapsed
        if (i + 1) % 1000 == 0:
            log(f'\rfragments: {i + 1:,}', end='')
