"""
polyedit Example: Basic Polygon Editing

This example walks through a short editing session:
1. Author two polygons
2. Probe a point for containment and for its nearest edge
3. Intersect two picked edges
4. Select a polygon and transform it

Perfect for: First-time users, quick start guide
"""

from polyedit import Event, Session, configure_logging


def main():
    configure_logging('INFO')
    print("=" * 60)
    print("polyedit Example: Basic Polygon Editing")
    print("=" * 60)

    session = Session()

    # Step 1: author a square and a triangle
    print("\n[1] Authoring polygons...")
    session.new_polygon()
    for p in [(0, 0), (100, 0), (100, 100), (0, 100)]:
        session.click(p)
    session.complete_polygon()
    session.new_polygon()
    for p in [(150, 20), (250, 20), (200, 120)]:
        session.click(p)
    session.complete_polygon()
    for poly in session.polygons:
        print(f"  {poly!r}")

    # Step 2: probes
    print("\n[2] Probing points...")
    session.toggle(Event.TOGGLE_POINT_PROBE)
    for p in [(50, 50), (200, 50), (130, 50)]:
        hits = session.click(p)
        print(f"  {p}: inside {[poly.id for poly in hits]}")
    session.toggle(Event.TOGGLE_EDGE_PROBE)
    check = session.click((60, -5))
    print(f"  (60, -5): nearest edge {check.edge.edge_index} of polygon {check.edge.polygon_id}, "
          f"side {check.side.value}")

    # Step 3: intersect the square's bottom edge with a hand-drawn segment
    print("\n[3] Intersecting edges...")
    session.toggle(Event.TOGGLE_EDGE_INTERSECT)
    session.click((50, 2))      # picks the bottom edge
    session.click((20, -40))    # starts an ad-hoc segment
    point = session.click((40, 40))
    print(f"  intersection: {point}")

    # Step 4: select and transform
    print("\n[4] Transforming the triangle...")
    session.toggle(Event.TOGGLE_SELECT)
    session.click((200, 50))
    info = session.selection_info()
    print(f"  selected polygon {info.polygon_id}, centroid {info.centroid}")
    session.rotate_selected_around_center(90)
    session.scale_selected_around_center(0.5)
    session.translate_selected(-10, 10)
    info = session.selection_info()
    print(f"  after transforms, centroid {info.centroid}")
    for v in session.selected_polygon().vertices:
        print(f"    ({v.x:.2f}, {v.y:.2f})")


if __name__ == "__main__":
    main()
