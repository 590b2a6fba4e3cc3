"""
Entry point for running tonegrid as a module

Prints the tone table of a tuning: python -m tonegrid [file.tun]

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and tonegrid contributors

MIT License
"""

import sys
from tonegrid.logger import set_global_logging
from tonegrid import (
    TONE_COUNT,
    TuningConfig,
    load_tun,
    tone_to_freq,
    tone_to_name,
    __version__,
)


def main():
    """Main entry point"""
    logger = set_global_logging(level="INFO")
    logger.info(f"tonegrid v{__version__} starting...")
    
    config = TuningConfig.default()
    if len(sys.argv) > 1:
        imported = load_tun(sys.argv[1])
        if imported is None:
            return 1
        config = imported
    
    for tone in range(TONE_COUNT):
        freq = tone_to_freq(
            tone,
            config,
            config.equal_temperament,
            config.concert_pitch,
            config.concert_pitch_note,
        )
        name = tone_to_name(tone, config.equal_temperament)
        print(f"{tone:3d}  {name:>4}  {freq:10.4f} Hz")
    return 0


if __name__ == "__main__":
    sys.exit(main())
