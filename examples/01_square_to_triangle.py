"""Square to triangle.

A red square fades in, holds, morphs into a blue triangle and fades out,
with captions that track the shapes:

- square caption fades in with the square and is typed away after it,
- triangle caption is typed in while the morph runs,
- both triangle windows end together.

Renders ``square_to_triangle.mp4`` with the ``preview`` preset (requires
FFmpeg on PATH).
"""

import dataclasses
import logging

from morphline import (
    AnimatedEntity,
    Color,
    Fade,
    NoAnimation,
    Polygon,
    PolygonMorph,
    Text,
    TextType,
    Timeline,
)
from morphline.render import Renderer, get_preset

logging.basicConfig(level=logging.INFO)

RED = Color.rgb(200, 0, 0)
BLUE = Color.rgb(0, 0, 200)
SHAPE_SCALE = 150.0

square = (
    Polygon([(0.0, 0.0), (SHAPE_SCALE, 0.0), (SHAPE_SCALE, SHAPE_SCALE), (0.0, SHAPE_SCALE)])
    .shift(-SHAPE_SCALE / 2, -SHAPE_SCALE / 2)
    .fill(RED)
    .outline(RED.darken(0.5))
)
triangle = (
    Polygon([(0.0, 0.0), (SHAPE_SCALE, 0.0), (SHAPE_SCALE / 2, SHAPE_SCALE)])
    .shift(-SHAPE_SCALE / 2, -SHAPE_SCALE / 2)
    .fill(BLUE)
    .outline(BLUE.darken(0.5))
)
square_text = Text("Square").size(28).at(0.0, -SHAPE_SCALE / 2 - 30)
triangle_text = Text("Triangle").size(28).at(0.0, -SHAPE_SCALE / 2 - 30)

# Square: 2 s fade in, held for 1 s, then popped off
square_anim = AnimatedEntity(
    square, Fade(square).handle().duration(2.0), NoAnimation().handle()
).lifetime(1.0)

square_text_anim = AnimatedEntity(
    square_text,
    Fade(square_text).handle().synchronize(square_anim.enter),
    TextType(square_text).handle().duration(square_text.wpm(140.0)).reverse().after(square_anim.exit),
)

triangle_text_enter = (
    TextType(triangle_text).handle().duration(triangle_text.wpm(140.0)).after(square_text_anim.exit)
)

# Morph starts with the caption hand-over and ends once the triangle caption is typed
triangle_anim = AnimatedEntity(
    triangle,
    PolygonMorph(square, triangle).handle().start_with(square_text_anim.exit).end_with(triangle_text_enter),
    Fade(triangle).handle().duration(2.0).reverse(),
).lifetime(1.0)

triangle_text_anim = AnimatedEntity(
    triangle_text,
    triangle_text_enter,
    Fade(triangle_text).handle().reverse().synchronize(triangle_anim.exit),
)

timeline = Timeline()
for entity in (square_anim, triangle_anim, square_text_anim, triangle_text_anim):
    timeline.add_animated(entity)

print(f"Timeline length: {timeline.end_time:.2f} s")

settings = dataclasses.replace(get_preset("preview"), workers=4)
result = Renderer(settings, timeline).render("square_to_triangle.mp4")
print(f"Wrote {result.output_path} ({result.frame_count} frames, {result.duration_seconds:.2f} s)")
