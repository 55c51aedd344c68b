# Tile IDs for a rendered cell (TSV export, tileset lookup).

HALL = 0
WALL = 1
PRIZE = 2
PLAYER = 3

def tile_for(is_wall: bool, player: bool, prize: bool) -> int:
    # Player wins over prize; they never share a cell during play anyway.
    if is_wall:
        return WALL
    if player:
        return PLAYER
    if prize:
        return PRIZE
    return HALL

def is_open(tile: int) -> bool:
    return tile != WALL
