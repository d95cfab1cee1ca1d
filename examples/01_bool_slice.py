"""Slice flags take comma-separated lists. The first occurrence of a flag replaces
its default, and later occurrences append.

Usage:
`python ./01_bool_slice.py`
`python ./01_bool_slice.py --bs 1,F,TRUE`
`python ./01_bool_slice.py --bs T,F --bs T`
`python ./01_bool_slice.py --bs '"true, false,   T"' -n 3`
`python ./01_bool_slice.py --bs maybe`
"""

import sys

import flagslice

if __name__ == "__main__":
    fs = flagslice.FlagSet(sys.argv[0], flagslice.ErrorHandling.EXIT_ON_ERROR)
    bs = fs.bool_slice("bs", [False, True], "Comma-separated list of booleans.")
    ns = fs.int_slice("numbers", [], "Comma-separated list of ints.", shorthand="n")
    fs.parse(sys.argv[1:])
    print(bs, ns)
