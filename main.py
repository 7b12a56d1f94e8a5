# main.py
from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence

from algorithms import Algorithm, get_algorithm, run
from debug import COMPONENTS, Debug
from errors import CipherError, ConfigurationError
from settings import SettingsState
from suites import AlgorithmOption, Operation
from utilities import reflector_dict, resolve_wiring, rotor_dict

# ────────────────────────────────────────────────────────────────────────
#  0. Configuration & logging
# ────────────────────────────────────────────────────────────────────────


debug = Debug()
debug.toggle_global(False)

MAX_NAME_ATTEMPTS = 100


@dataclass(slots=True)
class Config:
    """Runtime switches for one CLI invocation."""

    operation: Operation = Operation.ENCRYPT
    algorithm: AlgorithmOption = AlgorithmOption.ENIGMA
    dest_dir: Path | None = None        # None: next to each input file
    verbose: bool = False


# ────────────────────────────────────────────────────────────────────────
#  1. File helpers
# ────────────────────────────────────────────────────────────────────────


def get_new_file_path(file: Path, dest_dir: Path, operation: Operation) -> Path:
    """Pick ``<stem>_encrypted.<ext>`` (or ``_decrypted``) that does not exist yet."""
    suffix = "_encrypted" if operation is Operation.ENCRYPT else "_decrypted"

    for i in range(MAX_NAME_ATTEMPTS):
        num = f" ({i})" if i else ""
        candidate = dest_dir / f"{file.stem}{suffix}{num}{file.suffix}"
        if not candidate.exists():
            return candidate

    raise FileExistsError(f"Couldn't find available name for the result of {file}")


def process_file(
    file: Path, algorithm: Algorithm, operation: Operation, dest_dir: Path
) -> Path:
    """Run *algorithm* over the whole file and write the result beside it."""
    content = file.read_bytes()
    processed = run(algorithm, operation, content)

    new_path = get_new_file_path(file, dest_dir, operation)
    new_path.write_bytes(processed)
    debug.log("files", f"{file} ({len(content)} B) -> {new_path} ({len(processed)} B)")
    return new_path


# ────────────────────────────────────────────────────────────────────────
#  2. CLI helpers
# ────────────────────────────────────────────────────────────────────────


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Encrypt or decrypt files with Enigma or XXTEA")
    p.add_argument("operation", choices=[op.value for op in Operation])
    p.add_argument("files", nargs="+", type=Path, metavar="FILE")
    p.add_argument("-a", "--algorithm", choices=[o.value for o in AlgorithmOption], default=AlgorithmOption.ENIGMA.value, help="Cipher to use. Default: enigma")
    p.add_argument("-d", "--dest-dir", type=Path, help="Write results here instead of next to each input.")

    enigma = p.add_argument_group("enigma", "Wirings may also be wheel names (I-VII, reflectors A-C).")
    enigma.add_argument("--reflector", metavar="WIRING")
    for i in (1, 2, 3):
        enigma.add_argument(f"--rotor{i}", nargs=3, metavar=("WIRING", "NOTCH", "POSITION"))
    enigma.add_argument("--plugboard", metavar="PAIRS", help='e.g. "po ml iu"; pass "" for none')

    xxtea = p.add_argument_group("xxtea")
    xxtea.add_argument("--key")
    xxtea.add_argument("--iv", help="CFB initialisation vector (at least block-size bytes)")
    xxtea.add_argument("--block-size", dest="block_size", help="CFB block size, a multiple of 4 and at least 8")

    p.add_argument("-v", "--verbose", nargs="*", choices=COMPONENTS, metavar="COMPONENT", help=f"Debug logging for the given components (all when none given): {', '.join(COMPONENTS)}")
    return p.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    return Config(
        operation=Operation(args.operation),
        algorithm=AlgorithmOption(args.algorithm),
        dest_dir=args.dest_dir,
        verbose=args.verbose is not None,
    )


def build_settings(args: argparse.Namespace, cfg: Config) -> SettingsState:
    """Overlay the command-line values on the default settings."""
    settings = SettingsState(algorithm_option=cfg.algorithm)

    e = settings.enigma_args
    if args.reflector is not None:
        e.refl_wiring = resolve_wiring(args.reflector, reflector_dict)
    for i in (1, 2, 3):
        rotor = getattr(args, f"rotor{i}")
        if rotor is not None:
            wiring, notch, position = rotor
            setattr(e, f"rot{i}_wiring", resolve_wiring(wiring, rotor_dict))
            setattr(e, f"rot{i}_notch", notch)
            setattr(e, f"rot{i}_position", position)
    if args.plugboard is not None:
        e.plugboard = args.plugboard

    if args.key is not None:
        settings.xxtea_args.key = args.key
        settings.xxtea_cfb_args.key = args.key
    if args.iv is not None:
        settings.xxtea_cfb_args.iv = args.iv
    if args.block_size is not None:
        settings.xxtea_cfb_args.block_size = args.block_size
    return settings


def configure_logging(components: List[str] | None) -> None:
    if components is None:
        return
    debug.toggle_global(True)
    debug.enable(*(components or COMPONENTS))


# ────────────────────────────────────────────────────────────────────────
#  3. Main entry point
# ────────────────────────────────────────────────────────────────────────


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    cfg = build_config(args)
    configure_logging(args.verbose)

    try:
        algorithm = get_algorithm(build_settings(args, cfg))
    except ConfigurationError as exc:
        print(f"❌  Invalid {cfg.algorithm} settings: {exc}", file=sys.stderr)
        return 2

    failures = 0
    for file in args.files:
        dest_dir = cfg.dest_dir if cfg.dest_dir is not None else file.parent
        try:
            out = process_file(file, algorithm, cfg.operation, dest_dir)
        except (CipherError, OSError) as exc:
            failures += 1
            print(f"❌  {file}: {exc}", file=sys.stderr)
            continue
        print(f"✅  {file} -> {out}")

    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
