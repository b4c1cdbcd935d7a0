"""Draw a hexagon outline, then inspect the schedule without FFmpeg.

Writes:
- ``hexagon_schedule.png``: Gantt chart of enter / steady / exit windows,
- ``hexagon_frames/hexagon_frame_XX.svg``: a handful of composed frames as SVG documents.
"""

import math
from pathlib import Path

from morphline import AnimatedEntity, Color, Fade, Polygon, PolygonDraw, Timeline, compose_frame
from morphline.render import frame_to_svg
from morphline.visualization import plot_timeline

WIDTH, HEIGHT, FPS = 640, 360, 12
RADIUS = 120.0

hexagon = Polygon(
    [(RADIUS * math.cos(k * math.pi / 3), RADIUS * math.sin(k * math.pi / 3)) for k in range(6)],
    fill_color=Color.rgb(0, 114, 178),
    outline_color=Color.rgb(230, 159, 0),
    stroke_width=6,
)

timeline = Timeline()
timeline.add_static(Polygon([(-300, 150), (300, 150), (300, 160), (-300, 160)], stroke_width=0))
timeline.add_animated(
    AnimatedEntity(
        hexagon,
        PolygonDraw(hexagon).handle().duration(3.0),
        Fade(hexagon).handle().duration(1.0).reverse(),
    ).lifetime(1.5)
)

plot_timeline(timeline, title="hexagon", save_path="hexagon_schedule.png")

frames = timeline.compile(FPS)
out_dir = Path("hexagon_frames")
out_dir.mkdir(exist_ok=True)
for frame in frames[:: FPS // 2]:
    svg = frame_to_svg(compose_frame(frame), WIDTH, HEIGHT, background=Color.rgb(20, 20, 30))
    path = out_dir / f"hexagon_frame_{frame.index:02d}.svg"
    path.write_text(svg)
    print(f"t={frame.time:5.2f}s  animations={len(frame.active_animations)}  -> {path}")
