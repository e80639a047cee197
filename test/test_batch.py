"""
This module contains some tests for Epicollapse. To run them, execute `python3 -m pytest` from the
root Epicollapse directory.

Copyright 2026 the Epicollapse authors

This file is part of Epicollapse. Epicollapse is free software: you can redistribute it and/or
modify it under the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later version. Epicollapse is
distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied
warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public
License for more details. You should have received a copy of the GNU General Public License along
with Epicollapse. If not, see <http://www.gnu.org/licenses/>.
"""

import pytest

import epicollapse.batch
import epicollapse.settings
from epicollapse.error import PairingError, FragmentAssemblyError
from epicollapse.record import Record


def make_pairs():
    return [
        [Record('chr1', 100, 110, 'a', 1, 'CT', 'A' * 10),
         Record('chr1', 105, 115, 'a', 2, 'CT', 'B' * 10)],
        [Record('chr1', 200, 210, 'b', 2, 'GA', 'B' * 10),
         Record('chr1', 205, 215, 'b', 1, 'GA', 'A' * 10)],
        [Record('chr1', 300, 320, 'c', 1, 'CT', 'A' * 20),
         Record('chr1', 305, 315, 'c', 2, 'CT', 'B' * 10)],
        [Record('chr1', 400, 410, 'd', 1, 'CT', 'A' * 10),
         Record('chr2', 405, 415, 'd', 2, 'CT', 'B' * 10)],
    ]


def malformed_pair():
    return [Record('chr1', 500, 510, 'e', 1, 'CT', 'A' * 9),
            Record('chr1', 505, 515, 'e', 2, 'CT', 'B' * 10)]


def test_collapse_fragments_1():
    records, summary = epicollapse.batch.collapse_fragments(make_pairs())
    assert [r.name for r in records] == ['a', 'b', 'c', 'd', 'd']
    assert [r.read_number for r in records] == [0, 0, 0, 1, 2]
    assert records[1].start == 200
    assert records[1].end == 215
    assert records[1].cpg == 'B' * 5 + 'A' * 10


def test_collapse_fragments_2():
    _, summary = epicollapse.batch.collapse_fragments(make_pairs())
    assert summary.outcome_counts[epicollapse.settings.CANONICAL] == 1
    assert summary.outcome_counts[epicollapse.settings.DOVETAIL] == 1
    assert summary.outcome_counts[epicollapse.settings.CONTAINMENT] == 1
    assert summary.outcome_counts[epicollapse.settings.CROSS_CHROMOSOME] == 1
    assert summary.total() == 4
    assert not summary.skipped


def test_collapse_fragments_3():
    pairs = make_pairs() + [malformed_pair()]
    with pytest.raises(FragmentAssemblyError):
        epicollapse.batch.collapse_fragments(pairs)


def test_collapse_fragments_4(capsys):
    pairs = make_pairs()
    pairs.insert(1, malformed_pair())
    records, summary = epicollapse.batch.collapse_fragments(pairs, skip_malformed=True)
    assert [r.name for r in records] == ['a', 'b', 'c', 'd', 'd']
    assert summary.total() == 5
    assert len(summary.skipped) == 1
    assert summary.skipped[0][0] == 'e'
    _, err = capsys.readouterr()
    assert 'skipping e' in err


def test_collapse_fragments_5():
    pairs = make_pairs() + [[Record('chr1', 600, 610, 'f', 1, 'CT', 'A' * 10)]]
    with pytest.raises(PairingError):
        epicollapse.batch.collapse_fragments(pairs)
    _, summary = epicollapse.batch.collapse_fragments(pairs, skip_malformed=True)
    assert summary.skipped[0][0] == 'f'


def test_collapse_fragments_6():
    serial_records, _ = epicollapse.batch.collapse_fragments(make_pairs() * 5)
    parallel_records, summary = epicollapse.batch.collapse_fragments(make_pairs() * 5, threads=2)
    assert parallel_records == serial_records
    assert summary.total() == 20


def test_collapse_fragments_7():
    pairs = make_pairs() + [malformed_pair()]
    with pytest.raises(FragmentAssemblyError):
        epicollapse.batch.collapse_fragments(pairs, threads=2)


def test_summary_log(capsys):
    summary = epicollapse.batch.CollapseSummary()
    summary.add(epicollapse.settings.DOVETAIL)
    summary.add(epicollapse.settings.DOVETAIL)
    summary.add_skipped('e', 'malformed')
    summary.log_summary()
    _, err = capsys.readouterr()
    assert 'fragments:' in err
    assert 'dovetail:' in err
    assert 'skipped:' in err
    assert repr(summary) == 'CollapseSummary(cross-chromosome=0, containment=0, dovetail=2, ' \
                           'canonical=0, skipped=1)'
