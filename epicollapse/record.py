"""
This module contains a class for describing one epiread record: a read (or a collapsed fragment)
placed on the reference along with its per-position methylation calls.

Copyright 2026 the Epicollapse authors

This file is part of Epicollapse. Epicollapse is free software: you can redistribute it and/or
modify it under the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later version. Epicollapse is
distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied
warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public
License for more details. You should have received a copy of the GNU General Public License along
with Epicollapse. If not, see <http://www.gnu.org/licenses/>.
"""


class Record(object):
    """
    Coordinates are 0-based and half-open, like Python slices, so a well-formed record has
    end - start == len(cpg). This isn't enforced here: malformed records are caught when a
    fragment is collapsed.
    """
    def __init__(self, chr, start, end, name, read_number, bs_strand, cpg, gpc=None):
        self.chr = chr
        self.start = start
        self.end = end
        self.name = name
        self.read_number = read_number
        self.bs_strand = bs_strand
        self.cpg = cpg
        self.gpc = gpc

    def __repr__(self):
        return self.name + ':' + self.chr + ':' + str(self.start) + '-' + str(self.end) + \
               '(' + str(self.read_number) + ')'

    def __str__(self):
        parts = [self.chr, str(self.start), str(self.end), self.name, str(self.read_number),
                 str(self.bs_strand), self.cpg]
        if self.gpc is not None:
            parts.append(self.gpc)
        return '\t'.join(parts)

    def __eq__(self, other):
        if not isinstance(other, Record):
            return NotImplemented
        return (self.chr, self.start, self.end, self.name, self.read_number, self.bs_strand,
                self.cpg, self.gpc) == \
               (other.chr, other.start, other.end, other.name, other.read_number,
                other.bs_strand, other.cpg, other.gpc)

    def length(self):
        return self.end - self.start

    def has_gpc(self):
        return self.gpc is not None

    def copy(self, read_number=None):
        if read_number is None:
            read_number = self.read_number
        return Record(self.chr, self.start, self.end, self.name, read_number, self.bs_strand,
                      self.cpg, self.gpc)
