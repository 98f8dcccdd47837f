# examples/plot_shapes.py
from geoshapes.plot import figure

if __name__ == "__main__":
    fig = figure()  # коло, квадрат, куля, куб з report.demo_shapes()
    fig.savefig("shapes.png", dpi=120, bbox_inches="tight")
    print("Wrote shapes.png")
