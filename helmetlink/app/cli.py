from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from ..config import DEFAULT_DEVICE, DEFAULT_IMAGE_PATH, DEVICE_ENV_VAR, LinkConfig
from ..errors import HelmetLinkError
from ..protocol import FrameTransmitter
from ..rendering import ImageSource, RotatingView
from ..transport import FileChannel, SerialChannel

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Send an image to the helmet display over serial. Device path comes from "
            f"--device, ${DEVICE_ENV_VAR} or defaults to {DEFAULT_DEVICE}."
        )
    )
    parser.add_argument("path", nargs="?", help=f"Image file to send (default: {DEFAULT_IMAGE_PATH})")
    parser.add_argument("--device", help="Serial device path (e.g. /dev/ttyUSB0)")
    parser.add_argument("--baud", type=int, help="Serial baud rate (default: 115200)")
    parser.add_argument("--output", metavar="PATH", help="Write the framed bytes to a file instead of a port")
    parser.add_argument("--fit", action="store_true", help="Resize the image to the display size")
    parser.add_argument("--delay-ms", type=int, help="Pause after each block in milliseconds (default: 10)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> LinkConfig:
    return LinkConfig.from_env().with_overrides(
        image_path=args.path,
        device=args.device,
        baud_rate=args.baud,
        output=args.output,
        fit=args.fit or None,
        block_delay_ms=args.delay_ms,
    )


def send_image(config: LinkConfig) -> int:
    image = ImageSource(config.width, config.height, fit=config.fit).load(config.image_path)
    logger.info("Constructing rotated view...")
    view = RotatingView(image.samples, image.width, image.height)
    if config.output:
        channel = FileChannel(config.output)
    else:
        channel = SerialChannel(config.device, config.baud_rate)
    logger.info("Sending %d pixels...", len(view))
    with channel:
        FrameTransmitter(channel, block_delay_ms=config.block_delay_ms).send(view)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return send_image(build_config(args))
    except HelmetLinkError as exc:
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
