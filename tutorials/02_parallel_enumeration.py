"""
Parallel Enumeration Tutorial

Goals:
- Run the same search sequentially and on a thread pool
- Confirm both produce the same candidates (order may differ)
"""

from collections import Counter

from ssenum import PRESET_PARALLEL, Restrictions, enumerate_candidates, enumerate_parallel


def main():
    restrictions = Restrictions(max_mutations=2)

    serial = enumerate_candidates("GCAUGCAU", restrictions)
    parallel = enumerate_parallel("GCAUGCAU", restrictions, {'max_parallel_workers': 4})
    print('serial:', len(serial), 'parallel:', len(parallel))
    print('same_content:', Counter(serial) == Counter(parallel))

    # The config flag routes enumerate_candidates through the parallel variant.
    routed = enumerate_candidates("GCAUGCAU", restrictions, PRESET_PARALLEL)
    print('routed_same_content:', Counter(routed) == Counter(serial))


if __name__ == '__main__':
    main()
