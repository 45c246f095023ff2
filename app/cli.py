import argparse, dataclasses, logging, sys, typing
from pathlib import Path
from config import Config
from infra.logger import setup_logging
from .app_runner import AppRunner

def _arg_kwargs(f):
    tp, is_list = f.type, False
    if typing.get_origin(tp) is typing.Union:
        tp = next(a for a in typing.get_args(tp) if a is not type(None))
    if typing.get_origin(tp) is list:
        tp, is_list = typing.get_args(tp)[0], True
    required = f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING
    if required:
        return {"type": tp, "nargs": "+"} if is_list else {"type": tp}
    if is_list:
        # one value per flag so trailing positionals are not swallowed;
        # None keeps the dataclass default_factory
        return {"type": tp, "nargs": 1, "action": "extend", "default": None}
    return {"type": tp, "default": f.default}

def build_parser():
    parser = argparse.ArgumentParser(
        prog="faceshield", description="Blur detected faces with a feathered elliptical mask."
    )
    for f in dataclasses.fields(Config):
        kwargs = _arg_kwargs(f)
        if "default" in kwargs:
            parser.add_argument(f"--{f.name.replace('_', '-')}", **kwargs)
        else:
            parser.add_argument(f.name, **kwargs)
    return parser

def parse(argv=None) -> Config:
    parser = build_parser()
    args = {k: v for k, v in vars(parser.parse_args(argv)).items() if v is not None}
    try:
        return Config(**args).validate()
    except ValueError as e:
        parser.error(str(e))

def main(argv=None):
    cfg = parse(argv)
    setup_logging(cfg.log_level)

    missing = [p for p in cfg.inputs if not Path(p).is_file()]
    for p in missing:
        logging.error("File not found: %s", p)
    if missing:
        return 1

    logging.info(
        "blur=%gpx feather=%gpx confidence=%.2f",
        cfg.blur_radius, cfg.feather_radius, cfg.min_confidence,
    )
    try:
        runner = AppRunner(cfg)
    except Exception as e:
        logging.error("Cannot load face model %s: %s", cfg.face_model, e)
        return 1
    return 1 if runner.run() else 0

if __name__ == "__main__":
    sys.exit(main())
