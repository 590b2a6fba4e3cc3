"""
01_tuning_tour.py

Prints what the piano roll sees under different tunings, curve shapes and
zoom levels.

Usage:
  python examples/01_tuning_tour.py
  python examples/01_tuning_tour.py 2
  python examples/01_tuning_tour.py a

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and tonegrid contributors

MIT License
"""

import numpy as np

import tonegrid as tg

# A quarter-comma meantone octave, in cents above C
MEANTONE_CENTS = [
    0.0, 76.0, 193.2, 310.3, 386.3, 503.4,
    579.5, 696.6, 772.6, 889.7, 1006.8, 1082.9,
]


def _meantone_tun_lines():
    lines = ["; quarter-comma meantone", "basefreq = 8.1757989156"]
    for tone in range(tg.TONE_COUNT):
        octave, step = divmod(tone, 12)
        lines.append(f"note{tone} = {octave * 1200 + MEANTONE_CENTS[step]}")
    return lines


def demo_key_names():
    print("Key names")
    print("---------")
    for tone in (21, 60, 61, 69, 108):
        label = tg.tone_to_name(tone)
        color = "black" if tg.is_black_key(tone) else "white"
        print(f"  {tone:3d}  {label:>4}  {color:5}  {tg.tone_to_solfege(tone)}")
    print(f"  'Bb3' parses to {tg.name_to_tone('Bb3')}")


def demo_temperaments():
    print("Equal temperaments vs meantone")
    print("------------------------------")
    meantone = tg.parse_tun(_meantone_tun_lines())
    for tone in range(60, 73):
        et12 = tg.tone_to_freq(tone)
        et19 = tg.tone_to_freq(tone, equal_temperament=19)
        mt = tg.tone_to_freq(
            tone, meantone, meantone.equal_temperament,
            meantone.concert_pitch, meantone.concert_pitch_note,
        )
        print(f"  {tone:3d}  12-ET {et12:8.3f}  19-ET {et19:8.3f}  meantone {mt:8.3f}")


def demo_curves():
    print("Pitch curve shapes, 0 -> 100 cents over 10 ticks")
    print("------------------------------------------------")
    xs = np.arange(0, 11, 2)
    for shape in tg.PitchPointShape:
        ys = tg.interpolate_shape(0, 10, 0, 100, xs, shape)
        cells = " ".join(f"{y:6.1f}" for y in ys)
        half = float(tg.interpolate_shape_x(0, 10, 0, 100, 50, shape))
        print(f"  {shape.name:12} {cells}   50 cents at x={half:.2f}")


def demo_grid():
    print("Grid levels for 4/4 at 480 ticks per quarter")
    print("--------------------------------------------")
    print(f"  snap divisions: {tg.get_snap_divs(tg.RESOLUTION)}")
    for quarter_width in (2.0, 12.0, 48.0, 200.0):
        ratio = tg.get_zoom_ratio(quarter_width, 4, 4, 20.0)
        ticks, div = tg.get_snap_unit(tg.RESOLUTION, tg.RESOLUTION * ratio)
        ms = tg.tempo_tick_to_ms(120, ticks)
        print(f"  quarter {quarter_width:6.1f}px  ratio {ratio:g}  snap 1/{div} = {ticks} ticks ({ms:g} ms)")


DEMOS = {
    "Key names": demo_key_names,
    "Temperaments": demo_temperaments,
    "Curves": demo_curves,
    "Grid": demo_grid,
}

# ------------------------------------------------------------------------------
# Main

if __name__ == "__main__":
    import sys

    items = list(DEMOS.items())
    choice = sys.argv[1].strip().lower() if len(sys.argv) > 1 else "a"
    if choice == "a":
        for fn in DEMOS.values():
            fn()
            print()
    elif choice.isdigit() and 1 <= int(choice) <= len(items):
        items[int(choice) - 1][1]()
    else:
        print("Available demos:")
        for i, name in enumerate(DEMOS, start=1):
            print(f"  {i}: {name}")
        print("  a: run all")
