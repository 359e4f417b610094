"""Scene and particle configuration.

Configs are plain nested dicts. `build_config` returns a validated deep copy
of DEFAULT_CONFIG with overrides applied; nothing mutates a config after it
has been handed to a Scene.
"""

import copy
import logging
import math

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised for a configuration that cannot drive a scene."""


# --- Defaults ---

DEFAULT_CONFIG = {
    "scene": {
        "color": "#333333",
        "alpha": 30,  # 0-255
    },
    "particle": {
        "amount": 50,
        "factor": {"inner": 20, "outer": 120},
        "follow_speed": 0.05,
        "rotation_speed": 0.0005,
        "changing_hue_speed": 0.5,
        "color": {
            "hue": {"min": 0, "max": 50},
            "lightness": {"min": 20, "max": 90},
        },
        "line_width": {"min": 2, "max": 6},
    },
}

# --- Hue palettes ---

PALETTES = {
    "ember": {"min": 0, "max": 50},
    "ocean": {"min": 180, "max": 240},
    "neon": {"min": 280, "max": 330},
    "forest": {"min": 90, "max": 150},
    "mono": {"min": 200, "max": 200},
}

PALETTE_NAMES = list(PALETTES.keys())


# --- Building and validation ---


def build_config(palette=None, amount=None, base=None, **particle_overrides):
    """Return a validated copy of `base` (DEFAULT_CONFIG by default).

    `palette` replaces the hue range, `amount` the particle count. Any other
    keyword replaces the matching top-level particle entry, for example
    `follow_speed=1` or `factor={"inner": 10, "outer": 10}`.
    """
    config = copy.deepcopy(DEFAULT_CONFIG if base is None else base)
    particle = config["particle"]

    if palette is not None:
        if palette not in PALETTES:
            raise ConfigError(
                f"Unknown palette '{palette}'. Choose from: {', '.join(PALETTES)}"
            )
        particle["color"]["hue"] = dict(PALETTES[palette])
    if amount is not None:
        particle["amount"] = amount

    for key, value in particle_overrides.items():
        if key not in particle:
            raise ConfigError(f"Unknown particle setting '{key}'")
        particle[key] = copy.deepcopy(value)

    validate_config(config)
    return config


def _check_range(name, low, high):
    if low > high:
        raise ConfigError(f"{name}: lower bound {low} is above upper bound {high}")


def validate_config(config):
    scene = config["scene"]
    particle = config["particle"]

    if not 0 <= scene["alpha"] <= 255:
        raise ConfigError(f"scene.alpha must be within 0-255, got {scene['alpha']}")
    if particle["amount"] < 1:
        raise ConfigError(f"particle.amount must be positive, got {particle['amount']}")

    factor = particle["factor"]
    _check_range("particle.factor", factor["inner"], factor["outer"])
    for key in ("hue", "lightness"):
        bounds = particle["color"][key]
        _check_range(f"particle.color.{key}", bounds["min"], bounds["max"])
    bounds = particle["line_width"]
    _check_range("particle.line_width", bounds["min"], bounds["max"])


def generate_random_config(rng, palette=None, base=None):
    """Randomize the motion parameters around the defaults.

    Colour ranges come from `palette` (or stay as in `base`); everything else
    that shapes the swirl is drawn from `rng`.
    """
    inner = int(rng.integers(5, 60, endpoint=True))
    outer = int(rng.integers(inner, inner + 150, endpoint=True))
    config = build_config(
        palette=palette,
        base=base,
        factor={"inner": inner, "outer": outer},
        follow_speed=float(rng.uniform(0.02, 0.15)),
        rotation_speed=float(rng.uniform(0.0002, 0.0015)),
        changing_hue_speed=float(rng.uniform(0.1, 1.5)),
    )
    logger.debug("Generated random particle config: %s", config["particle"])
    return config


def describe_config(config):
    """One line per setting, for the CLI summaries."""
    particle = config["particle"]
    factor = particle["factor"]
    hue = particle["color"]["hue"]
    lightness = particle["color"]["lightness"]
    width = particle["line_width"]
    rotation = particle["rotation_speed"]
    return [
        f"Scene: color={config['scene']['color']}  alpha={config['scene']['alpha']}",
        f"Particles: {particle['amount']}  "
        f"Factor={factor['inner']}-{factor['outer']}  "
        f"FollowSpeed={particle['follow_speed']:.3f}  "
        f"RotationSpeed={rotation:.4f} "
        f"({math.degrees(rotation * factor['inner']):.2f}-"
        f"{math.degrees(rotation * factor['outer']):.2f}°/frame)",
        f"Color: Hue={hue['min']}-{hue['max']}  "
        f"Lightness={lightness['min']}-{lightness['max']}  "
        f"HueDrift={particle['changing_hue_speed']:.2f}",
        f"LineWidth={width['min']}-{width['max']}",
    ]
