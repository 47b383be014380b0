"""Example: palette swatches, an accessibility report and a CSS export."""

import furman_plots as fp

fp.show_palettes(filename="furman-palettes.svg")

for result in fp.check_contrast("main", backgrounds=["#ffffff", "midnight purple"]):
    status = "pass" if result.passes else "fail"
    print(f"{result.foreground.name:>12} on {result.background.hex}: {result.ratio:5.2f}  {status}")

print(fp.export_palette("cool", "css"))
