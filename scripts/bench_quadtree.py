import random
import time

from regionquad import Point, QuadTree


def main() -> None:
    rng = random.Random(0)
    points = [Point(rng.uniform(-1000.0, 1000.0), rng.uniform(-1000.0, 1000.0), value=i) for i in range(20000)]

    tree = QuadTree()
    start = time.perf_counter()
    for p in points:
        tree.insert(p)
    insert_ms = (time.perf_counter() - start) * 1000.0

    start = time.perf_counter()
    hits = 0
    for _ in range(1000):
        hits += len(tree.query_radius(rng.uniform(-1000.0, 1000.0), rng.uniform(-1000.0, 1000.0), 25.0))
    query_ms = (time.perf_counter() - start) * 1000.0

    print(
        f"insert_ms={insert_ms:.3f} query_ms={query_ms:.3f} hits={hits} "
        f"rebuilds={tree.rebuild_count} height={tree.root.height()}"
    )


if __name__ == "__main__":
    main()
