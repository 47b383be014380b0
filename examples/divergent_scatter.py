"""Example: deviations from the mean on a divergent scale centred at zero."""

import numpy as np

import furman_plots as fp

rng = np.random.default_rng(7)
weight = rng.uniform(1.5, 5.5, 60)
mpg = 37 - 5 * weight + rng.normal(0, 2, len(weight))
deviation = mpg - mpg.mean()

fig, ax = fp.figure(variant="presentation")
scale = fp.scale_color("divergent1", discrete=False, midpoint=0, limits=(-8, 12))
points = ax.scatter(weight, mpg, c=deviation, s=60, **scale.kwargs())
fig.colorbar(points, ax=ax, label="MPG vs. mean")

ax.set_title("Fuel Efficiency by Weight")
ax.set_xlabel("Weight (1000 lbs)")
ax.set_ylabel("Miles per Gallon")

fp.save(fig, "fuel-efficiency.svg")
