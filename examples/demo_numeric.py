# examples/demo_numeric.py
import logging

from geoshapes.numeric import exact, estimate
from geoshapes.report import demo_shapes

if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    print(f"{'shape':>8} {'measure':>10} {'exact':>12} {'hull':>12} {'rel.err':>10}")
    for shape in demo_shapes():
        ex, est = exact(shape), estimate(shape, backend="scipy")
        for name in ("area", "perimeter", "volume"):
            a, b = getattr(ex, name), getattr(est, name)
            if a is None or b is None:
                continue
            err = abs(b - a) / a if a else 0.0
            print(f"{type(shape).__name__:>8} {name:>10} {a:12.6f} {b:12.6f} {err:10.2e}")
