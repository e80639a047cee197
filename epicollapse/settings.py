"""
This module contains some hard-coded settings used in various parts of Epicollapse. These are
fixed by the epiread format conventions rather than exposed to the user, but developers may want
to refer to them.

Copyright 2026 the Epicollapse authors

This file is part of Epicollapse. Epicollapse is free software: you can redistribute it and/or
modify it under the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later version. Epicollapse is
distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied
warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public
License for more details. You should have received a copy of the GNU General Public License along
with Epicollapse. If not, see <http://www.gnu.org/licenses/>.
"""

# Call-string symbol for positions between two mates that neither read sequenced. Downstream
# consumers must accept it as a valid member of the call alphabet.
GAP_SYMBOL = 'x'

# Read numbers: mates are 1 and 2 on input, a collapsed fragment is 0.
MATE_READ_NUMBERS = {1, 2}
MERGED_READ_NUMBER = 0

# Names for the ways a read pair can be resolved.
CROSS_CHROMOSOME = 'cross-chromosome'
CONTAINMENT = 'containment'
DOVETAIL = 'dovetail'
CANONICAL = 'canonical'
OUTCOMES = [CROSS_CHROMOSOME, CONTAINMENT, DOVETAIL, CANONICAL]
