"""Entity types."""


class CoverType:
    """Cover archetypes. Only affects how the cover is drawn."""
    BARREL = "barrel"
    TABLE = "table"


class ParticleKind:
    """
    Feedback particle tags.
    Prevents typos and keys the particle presets.
    """
    FLASH = "flash"          # Player muzzle flash
    ENEMY_FLASH = "eflash"   # Enemy muzzle flash
    BLOOD = "blood"
    HOLE = "hole"            # Bullet-hole decal on a miss
    HIT = "hit"              # Impact flash on a hit

    ALL = frozenset({FLASH, ENEMY_FLASH, BLOOD, HOLE, HIT})
