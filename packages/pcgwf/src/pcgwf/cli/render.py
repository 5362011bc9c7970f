from __future__ import annotations
import argparse, json, logging, sys
from pathlib import Path

from .common import setup_logging, parse_assignments
from pcgcore.config import RenderConfig
from pcgcore.device import get_device
from pcgcore.errors import InvalidParamsError
from pcgproc import ParamCodec, list_generators, randomize
from pcgproc.registry import get_by_kind
from pcgwf.api import encode_png

MODELS = ("cosine_1d", "cosine_2d", "noise_field")

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="pcg - render a color field to PNG")
    p.add_argument("--model", choices=MODELS, default="noise_field")
    p.add_argument("--out", help="PNG output path")
    p.add_argument("--random", action="store_true", help="randomize the parameters first")
    p.add_argument("--seed", type=int, default=None, help="seed for --random")
    p.add_argument("--set", dest="assign", action="append", default=[], metavar="NAME=VALUE",
                   help="override one flat parameter (repeatable)")
    p.add_argument("--size", choices=("preview", "export"), default="export",
                   help="noise_field resolution from the config")
    p.add_argument("--width", type=int, default=None)
    p.add_argument("--height", type=int, default=None)
    p.add_argument("--dump-params", default=None, help="write the flat parameters used as JSON")
    p.add_argument("--list", action="store_true", help="list generators and exit")
    p.add_argument("--log-file", default=None)
    p.add_argument("--verbose", action="store_true")
    return p.parse_args(argv)

def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(Path(args.log_file) if args.log_file else None, verbose=args.verbose)

    if args.list:
        for info in list_generators():
            logging.info("%-12s kind=%-12s params=%d", info.name, info.kind, len(info.param_specs))
        return 0
    if not args.out:
        logging.error("--out is required")
        return 2

    cfg = RenderConfig.from_env()
    gen = get_by_kind(args.model)
    codec = ParamCodec(gen.info)
    params = gen.default_params()
    if args.random:
        randomize(params, args.seed)
    try:
        if args.assign:
            flat = codec.to_dict(params)
            flat.update(parse_assignments(args.assign))
            params = codec.from_dict(flat)
    except InvalidParamsError as e:
        logging.error("Invalid parameters: %s", e)
        return 2

    width, height = args.width, args.height
    if args.model == "noise_field" and (width is None or height is None):
        side = cfg.export_size if args.size == "export" else cfg.preview_size
        width, height = width or side, height or side

    kw = {"config": cfg} if args.model == "noise_field" else {}
    buf = gen.render(params, width, height, device=get_device(cfg.device), **kw)
    logging.info("%s rendered %dx%d", gen.info.name, buf.width, buf.height)
    try:
        encode_png(buf, args.out)
        if args.dump_params:
            Path(args.dump_params).write_text(json.dumps(codec.to_dict(params), indent=2), encoding="utf-8")
    except OSError:
        logging.exception("Could not write %s", args.out)
        raise
    return 0

if __name__ == "__main__":
    sys.exit(main())
