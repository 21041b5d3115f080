from hexmath import Cube, HexGridSettings, Offset

settings = HexGridSettings(cell_size=32.0, rounding_mode="floor")
grid = settings.integer_system()

clicks = [(0.0, 0.0), (48.0, 27.7), (100.0, -40.0), (-75.5, 130.2)]


if __name__ == "__main__":
    for click in clicks:
        cube = grid.point_to_cube(click)
        offset = grid.point_to_offset(click)
        print(f"click {click} -> cube {tuple(cube)} offset {tuple(offset)}")

    centre = grid.cube_to_point(Cube.axial(3, -1))
    print("centre of cube (3, -1):", centre)
    print("centre of offset (3, 0):", grid.offset_to_point(Offset(3, 0)))
