"""
This module contains functions for collapsing the two mates of a paired-end read into a single
fragment record, so that CpG/GpC calls in the overlap between the mates are only counted once.

Copyright 2026 the Epicollapse authors

This file is part of Epicollapse. Epicollapse is free software: you can redistribute it and/or
modify it under the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later version. Epicollapse is
distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied
warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public
License for more details. You should have received a copy of the GNU General Public License along
with Epicollapse. If not, see <http://www.gnu.org/licenses/>.
"""

from .error import PairingError, GpcMismatchError, FragmentAssemblyError
from .log import quit_with_error
from .record import Record
from .settings import GAP_SYMBOL, MATE_READ_NUMBERS, MERGED_READ_NUMBER, CROSS_CHROMOSOME, \
    CONTAINMENT, DOVETAIL, CANONICAL


def collapse_to_fragment(reads):
    """
    Takes the two records of one fragment (in either order) and returns a list of records: both
    mates unchanged if they are on different chromosomes, otherwise one collapsed fragment with a
    read number of 0.
    """
    _, records = collapse_pair(reads)
    return records


def collapse_pair(reads):
    """
    Same as collapse_to_fragment, but also returns the name of the outcome (see settings.py).
    """
    r1, r2 = resolve_mates(reads)
    outcome = classify_pair(r1, r2)
    if outcome == CROSS_CHROMOSOME:
        return outcome, [r1, r2]
    elif outcome == CONTAINMENT:  # read 2 adds nothing that read 1 doesn't have
        return outcome, [r1.copy(read_number=MERGED_READ_NUMBER)]
    elif outcome == DOVETAIL:
        return outcome, [collapse_dovetail(r1, r2)]
    else:
        return outcome, [collapse_canonical(r1, r2)]


def collapse_or_quit(reads):
    """
    Collapses a read pair, treating a malformed fragment as fatal: both source records are logged
    and the program exits.
    """
    try:
        return collapse_to_fragment(reads)
    except FragmentAssemblyError as e:
        quit_with_error('Malformed collapsed fragment.', details=e.details())


def resolve_mates(reads):
    """
    Returns the pair as (read 1, read 2), whichever order they were given in.
    """
    reads = list(reads)
    if len(reads) != 2:
        names = ', '.join(sorted(set(r.name for r in reads)))
        raise PairingError(f'expected 2 records for a fragment but got {len(reads)} ({names})')
    read_numbers = sorted(r.read_number for r in reads)
    if set(read_numbers) != MATE_READ_NUMBERS:
        raise PairingError(f'{reads[0].name}: expected read numbers 1 and 2 but got '
                           f'{read_numbers[0]} and {read_numbers[1]}')
    if reads[0].name != reads[1].name:
        raise PairingError(f'mates have different names: {reads[0].name} and {reads[1].name}')
    if reads[0].read_number == 1:
        return reads[0], reads[1]
    else:
        return reads[1], reads[0]


def classify_pair(r1, r2):
    if r1.chr != r2.chr:
        return CROSS_CHROMOSOME
    if r1.start > r2.start:
        return DOVETAIL

    # Equal starts land here too, treating read 1 as the upstream read.
    if r1.end >= r2.end:
        return CONTAINMENT
    return CANONICAL


def collapse_dovetail(r1, r2):
    """
    Collapses a pair where read 2 starts before read 1. Read 1's calls are used wherever it has
    them, read 2 only contributes the positions before read 1's start (and after read 1's end, if
    it reaches that far).
    """
    check_gpc(r1, r2)
    new_start = r2.start
    new_end = r1.end
    if r1.start < r2.end and r1.end < r2.end:
        new_end = r2.end
    new_cpg = merge_dovetail_calls(r1, r2, r1.cpg, r2.cpg)
    new_gpc = None
    if r1.has_gpc():
        new_gpc = merge_dovetail_calls(r1, r2, r1.gpc, r2.gpc)
    return build_fragment(r1, r2, new_start, new_end, new_cpg, new_gpc)


def merge_dovetail_calls(r1, r2, calls_1, calls_2):
    if r2.end > r1.start:
        diff = r1.start - r2.start
        merged = calls_2[:diff] + calls_1
        if r2.end > r1.end:
            merged += calls_2[diff + len(r1.cpg):]
        return merged
    else:
        pad = GAP_SYMBOL * (r1.start - r2.end)
        return calls_2 + pad + calls_1


def collapse_canonical(r1, r2):
    """
    Collapses a pair where read 1 starts at or before read 2 and read 2 ends after read 1. Where
    the mates overlap, read 1's calls are kept.
    """
    check_gpc(r1, r2)
    new_cpg = merge_canonical_calls(r1, r2, r1.cpg, r2.cpg)
    new_gpc = None
    if r1.has_gpc():
        new_gpc = merge_canonical_calls(r1, r2, r1.gpc, r2.gpc)
    return build_fragment(r1, r2, r1.start, r2.end, new_cpg, new_gpc)


def merge_canonical_calls(r1, r2, calls_1, calls_2):
    if r2.start > r1.end:
        pad = GAP_SYMBOL * (r2.start - r1.end)
        return calls_1 + pad + calls_2
    else:
        diff = r1.end - r2.start
        return calls_1 + calls_2[diff:]


def check_gpc(r1, r2):
    if r1.has_gpc() != r2.has_gpc():
        raise GpcMismatchError(r1, r2)


def build_fragment(r1, r2, start, end, cpg, gpc):
    fragment = Record(r1.chr, start, end, r1.name, MERGED_READ_NUMBER, r1.bs_strand, cpg, gpc)
    check_fragment(fragment, r1, r2)
    return fragment


def check_fragment(fragment, r1, r2):
    if fragment.end - fragment.start != len(fragment.cpg):
        raise FragmentAssemblyError(r1, r2, fragment)
    if fragment.has_gpc() and len(fragment.gpc) != len(fragment.cpg):
        raise FragmentAssemblyError(r1, r2, fragment)
