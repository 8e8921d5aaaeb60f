"""
gameplay_config.py
------------------
Handles gameplay tuning loading with default fallbacks.

This ensures a session always starts even if gameplay.json is missing
or incomplete. Ranges stored as JSON lists are converted to tuples.
"""

from saloon.core.services.config_manager import load_config

# ===========================================================
# Default Fallback Configuration
# ===========================================================
DEFAULT_CONFIG = {
    # -----------------------------------------------------------
    # Player Resources
    # -----------------------------------------------------------
    "player": {
        "max_ammo": 6,
        "max_lives": 3,
        "reload_time": 2.0,          # Reload countdown
        "auto_reload_delay": 0.35,   # Empty cylinder -> reload request
        "game_over_delay": 0.55,     # Last life lost -> session ended
        "hit_flash": 0.55,           # Red screen pulse strength
        "hit_flash_decay": 2.2,
    },

    # -----------------------------------------------------------
    # Enemy Behaviour
    # -----------------------------------------------------------
    "enemy": {
        "entry_x": 412,              # Saloon door
        "base_speed": 115,
        "speed_per_wave": 12,
        "walk_frame_time": 0.14,
        "entry_hide": (0.4, 1.2),
        "warning": (0.45, 0.85),
        "peek": (0.85, 1.5),
        "shoot_duration": 0.72,
        "post_shot_hide": (0.9, 2.0),
        "retreat_duration": 0.45,
        "retreat_depth": 35,
        "post_retreat_hide": (1.0, 2.5),
        "dead_duration": 0.75,
        "fall_speed": 55,
        "fire_delay": 0.26,          # Enemy shot -> player damage
        "peek_offset": 28,
        "warning_offset": 30,
        "warning_bob_base": 28,
        "warning_bob": 5,
        "warning_bob_rate": 13.3,
        "hitbox": (60, 95),
        "hitbox_top": 68,
        "score_per_wave": 100,
        "outfits": 3,
    },

    # -----------------------------------------------------------
    # Wave Pacing
    # -----------------------------------------------------------
    "wave": {
        "base_target": 5,
        "target_per_wave": 2,
        "base_interval": 3.0,
        "interval_per_wave": 0.22,
        "min_interval": 1.1,
        "spawn_jitter": 0.8,
        "first_spawn_delay": 2.0,
        "next_wave_spawn_delay": 1.8,
        "advance_delay": 2.0,
        "banner_duration": 2.6,
        "banner_ramp": 1.6,
        "tough_from_wave": 3,
        "tough_hp": 2,
        "base_hp": 1,
        "max_active_base": 2,
        "max_active_per_wave": 0.6,
        "door_swing_decay": 1.5,
    },
}


# ===========================================================
# Load JSON + Apply Fallbacks
# ===========================================================
def load_gameplay_config(filename="gameplay.json", overrides=None):
    """
    Load gameplay tuning and apply fallback defaults for missing fields.

    Args:
        filename: Config file name or absolute path.
        overrides: Optional nested dict applied last (tests, CLI).

    Returns:
        dict: Complete gameplay configuration dictionary.
    """
    config = load_config(filename, default_dict=DEFAULT_CONFIG)

    for section, values in (overrides or {}).items():
        config.setdefault(section, {}).update(values)

    # JSON can't store tuples
    for section in config.values():
        if not isinstance(section, dict):
            continue
        for key, value in section.items():
            if isinstance(value, list):
                section[key] = tuple(value)

    return config
