"""
This module contains the exceptions raised while collapsing read pairs into fragments.

Copyright 2026 the Epicollapse authors

This file is part of Epicollapse. Epicollapse is free software: you can redistribute it and/or
modify it under the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later version. Epicollapse is
distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied
warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public
License for more details. You should have received a copy of the GNU General Public License along
with Epicollapse. If not, see <http://www.gnu.org/licenses/>.
"""


class PairingError(Exception):
    """
    Raised when the records given for one fragment are not a usable mate pair (wrong number of
    records, read numbers other than 1 and 2, or differing fragment names).
    """
    pass


class GpcMismatchError(PairingError):
    """
    Raised when one mate carries a GpC call string and the other does not. The fragment can't be
    merged but the rest of a run is unaffected.
    """

    def __init__(self, read_1, read_2):
        self.read_1 = read_1
        self.read_2 = read_2
        has_gpc = ['has' if r.has_gpc() else 'lacks' for r in (read_1, read_2)]
        super().__init__(f'{read_1.name}: read 1 {has_gpc[0]} GpC calls but read 2 '
                         f'{has_gpc[1]} them')


class FragmentAssemblyError(Exception):
    """
    Raised when a collapsed fragment's interval length disagrees with its call-string length.
    This means the input records were inconsistent, so both of them are kept on the exception
    for diagnosis.
    """

    def __init__(self, read_1, read_2, fragment):
        self.read_1 = read_1
        self.read_2 = read_2
        self.fragment = fragment
        super().__init__(f'malformed collapsed fragment {fragment!r}: interval length '
                         f'{fragment.end - fragment.start} but CpG string length '
                         f'{len(fragment.cpg)}\nRead 1: {read_1}\nRead 2: {read_2}')

    def details(self):
        return [f'Read 1: {self.read_1}', f'Read 2: {self.read_2}']
