"""
python -m wfobj model.obj [--output mesh.npz]

Печатает статистику разбора; с --output сохраняет треугольные буферы.
"""

import sys
from argparse import ArgumentParser

import numpy as np

from wfobj.errors import ObjParseError
from wfobj.io.reader import StreamReader
from wfobj.mesh.builder import MeshBuilder
from wfobj.parser.parser import Parser
from wfobj.utils.config import Config
from wfobj.utils.loader import parse_file
from wfobj.utils.logger import logger, set_level


def _main(argv=None):
    arg_parser = ArgumentParser(prog="wfobj", description="Parse a Wavefront OBJ file.")
    arg_parser.add_argument("input", help="OBJ file, or '-' for stdin")
    arg_parser.add_argument("--config", default=None, help="JSON config file")
    arg_parser.add_argument("--output", default=None, help="save triangulated arrays to .npz")
    arg_parser.add_argument("-v", "--verbose", action="store_true")
    args = arg_parser.parse_args(argv)

    config = Config(args.config)
    set_level("DEBUG" if args.verbose else config["log_level"])

    builder = MeshBuilder()
    try:
        if args.input == "-":
            parser = Parser(StreamReader(sys.stdin, config.section("reader")["chunk_size"]), builder, config)
            parser.parse()
            stats = parser.statistics
        else:
            stats = parse_file(args.input, builder, config)
    except (ObjParseError, FileNotFoundError, UnicodeDecodeError) as exc:
        logger.error(f"[Main] {exc}")
        return 1

    for name, value in stats.as_dict().items():
        print(f"{name}: {value}")

    if args.output:
        positions, normals, texcoords, indices = builder.build().triangulate()
        np.savez(args.output, positions=positions, normals=normals,
                 texcoords=texcoords, indices=indices)
        logger.info(f"[Main] Saved {len(indices) // 3} triangles to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(_main())
