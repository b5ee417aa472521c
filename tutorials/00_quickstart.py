"""
Quickstart Tutorial

Goals:
- Parse a nucleotide string
- Enumerate every bond arrangement of the unmutated sequence
- Inspect one candidate: its positions, bonds and dot-bracket rendering
"""

from ssenum import Restrictions, enumerate_candidates


def main():
    # A-U and C-G are the only pairs that may bond.
    # No mutations: only bond arrangements of the sequence as given.
    candidates = enumerate_candidates("AUGC", Restrictions(max_mutations=0))
    print('candidates:', len(candidates))
    for cand in candidates:
        print(' ', cand, cand.to_dot_bracket())

    # Every position knows whether it is mutated and which bond it belongs to.
    last = candidates[-1]
    for pos in last:
        print('  index', pos.index, 'symbol', pos.symbol, 'partner', pos.partner)


if __name__ == '__main__':
    main()
