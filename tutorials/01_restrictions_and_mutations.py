"""
Restrictions and Mutations Tutorial

Goals:
- Allow exactly one mutation at a chosen position
- Observe that bonds never span a mutated position
- Restrict which positions may bond and request ordered bonds
"""

from ssenum import Restrictions, enumerate_candidates, intset


def main():
    # Position 2 must mutate; the sequence splits into [0, 2) and [3, 5),
    # which are searched independently and recombined.
    split = Restrictions(min_mutations=1, max_mutations=1, mutation_positions=intset(2))
    for cand in enumerate_candidates("AUCAU", split):
        print('split:', cand)

    # Only positions 0 and 1 may bond; (0,1) and (1,0) are both enumerated.
    ordered = Restrictions(max_mutations=0, bond_positions=intset(0, 1), ordered_bonds=True)
    for cand in enumerate_candidates("AUGC", ordered):
        print('ordered:', cand)

    # Inverted bounds are not an error; they simply match nothing.
    print('inverted:', enumerate_candidates("AUGC", Restrictions(min_bonds=3)))


if __name__ == '__main__':
    main()
