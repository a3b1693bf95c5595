"""Basic rubberease usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from rubberease import EasingKind, IntervalMapper


def demonstrate_easing() -> None:
    # Fade opacity in over the first 200px of a drag.
    fade = IntervalMapper((0.0, 200.0)).with_destination((0.0, 1.0)).with_easing(EasingKind.EASE_OUT)
    for distance in (0.0, 50.0, 100.0, 200.0, 300.0):
        print(f"drag {distance:>5.0f}px -> opacity {fade(distance):.3f}")


def demonstrate_rubberband() -> None:
    # Pull-to-refresh: past the edges the offset keeps moving, but less and less.
    pull = IntervalMapper((0.0, 100.0)).with_rubberband(40.0)
    offsets = pull.interpolate(np.array([-200.0, -50.0, 0.0, 100.0, 150.0, 400.0]))
    print("rubberbanded offsets:", np.round(offsets, 2))


if __name__ == "__main__":
    demonstrate_easing()
    demonstrate_rubberband()
