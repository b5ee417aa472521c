"""
Observability & Determinism Tutorial

Goals:
- Build a consolidated report from an enumeration
- Compute the determinism signature and show it is stable across engines
- Summarise the ensemble with bond and mutation frequency matrices
"""

from ssenum import Restrictions, enumerate_candidates, enumerate_parallel
from ssenum.utils.observability import (
    bond_frequency_matrix,
    consolidated_report,
    determinism_signature,
    mutation_frequency,
)


def main():
    restrictions = Restrictions(max_mutations=1)
    serial = enumerate_candidates("GCAUGC", restrictions)
    parallel = enumerate_parallel("GCAUGC", restrictions)

    rep = consolidated_report(serial, "GCAUGC", restrictions)
    print('schema_version:', rep['schema_version'])
    print('total:', rep['total'], 'by_bond_count:', rep['by_bond_count'])
    print('serial_sig:', determinism_signature(rep))
    print('parallel_sig:', determinism_signature(consolidated_report(parallel, "GCAUGC", restrictions)))

    print('bond_frequency:')
    print(bond_frequency_matrix(serial, normalize=True).round(3))
    print('mutation_frequency:', mutation_frequency(serial).tolist())


if __name__ == '__main__':
    main()
