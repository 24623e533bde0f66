from regionquad import Point, QuadTree


def main() -> None:
    points = [Point(x * 1.0, y * 1.0, value=f"p{x}{y}") for x in range(5) for y in range(5)]
    tree = QuadTree()
    for p in points:
        tree.insert(p)

    found = tree.query_radius(2.0, 2.0, 1.5)
    assert len(found) == 9
    assert all(p.distance_to(2.0, 2.0) <= 1.5 for p in found)

    far = Point(-40.0, 60.0, value="far")
    tree.insert(far)
    assert tree.bounds.contains(far.x, far.y)
    assert tree.query_radius(far.x, far.y, 0.0) == [far]
    assert len(tree) == 26

    print(f"bounds={tree.bounds} rebuilds={tree.rebuild_count} height={tree.root.height()}")


if __name__ == "__main__":
    main()
