"""Example: three series on the main categorical palette."""

import numpy as np

import furman_plots as fp

years = np.arange(2015, 2025)
rng = np.random.default_rng(12)

fig, ax = fp.figure()
for label in ("Biology", "Chemistry", "Physics"):
    ax.plot(years, 40 + np.cumsum(rng.normal(1.5, 2.0, len(years))), label=label)

ax.set_title("Declared Majors")
ax.set_xlabel("Year")
ax.set_ylabel("Students")
ax.legend()

fp.save(fig, "declared-majors.svg")
