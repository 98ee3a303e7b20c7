from hexcoord import HexLayoutConfig, HexDirection

layout = HexLayoutConfig(radius=24.0)
start = layout.create(0, 0, 0)
goal = layout.create(4, -1, -3)


if __name__ == "__main__":
    print("start:", start, "at", (round(start.x, 2), round(start.y, 2)))
    print("goal:", goal, "at", (round(goal.x, 2), round(goal.y, 2)))
    print("distance:", start.distance_to(goal))
    print("line:", [str(h) for h in start.line_to(goal)])
    print("east of start:", start.neighbor(HexDirection.EAST))
    print("cell under (60, -30):", layout.locate(60, -30))
