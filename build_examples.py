"""Build the four example cores as GLB files under output/."""

import logging
import os
import sys

# Ensure the project root is on the path
sys.path.insert(0, os.path.dirname(__file__))

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

from coreplot import core_colors, core_plot
from coreplot.constants import OUTPUT_DIR
from coreplot.export import generate_glb


EXAMPLES = {
    # Sediment core, default alternating grays
    'sediment_default': dict(z=[3, 8, 6, 4, 2, 5]),
    # Clay / siliceous ooze / calcareous ooze, repeated down the core
    'sediment_colored': dict(z=[3, 8, 6, 4, 2, 5],
                             colors=['#fea12c', '#b147ce', '#20d962'],
                             radius=2),
    # Sandstone / shale / limestone from layer boundary depths
    'rock_depths': dict(z=[0, 12, 46, 100],
                        colors=[[225, 169, 95], [51, 0, 0], [152, 129, 123]],
                        radius=5, z_data_type='depth'),
    # Three-layer rock core from the 'rock' palette
    'rock_palette': dict(z=[0.0, 2.5, 7.71, 10.0],
                         colors=core_colors('rock', 3),
                         z_data_type='depth', view_angle='right'),
}


if __name__ == "__main__":
    for name, kwargs in EXAMPLES.items():
        plot = core_plot(**kwargs)
        result = generate_glb(plot, OUTPUT_DIR / f"{name}.glb")
        legend = ', '.join(layer.color_hex for layer in plot.legend_layers)
        print(f"{name}: {result['layers']} layers, legend [{legend}] "
              f"→ {result['output_path']}")
