# wheel_generator.py
from __future__ import annotations

import argparse
import string
import sys
from random import Random, SystemRandom
from typing import List, Sequence

from settings import EnigmaArgs

ALPHA26 = string.ascii_lowercase

# ─── helpers ────────────────────────────────────────────────────────────


def build_rng(seed: int | None) -> Random | SystemRandom:
    """Return deterministic RNG when *seed* is given, else CSPRNG."""
    return Random(seed) if seed is not None else SystemRandom()  # CSPRNG


def make_rotor(rng: Random | SystemRandom, alpha: str = ALPHA26) -> str:
    """Return a random permutation of *alpha*."""
    chars = list(alpha)
    rng.shuffle(chars)
    return "".join(chars)


def make_reflector(rng: Random | SystemRandom, alpha: str = ALPHA26) -> str:
    """Return an involutory reflector wiring for *alpha* (no self-maps)."""
    if len(alpha) % 2:
        raise ValueError("A reflector needs an even-sized alphabet")

    remaining = list(alpha)
    rng.shuffle(remaining)
    wiring = [""] * len(alpha)

    while remaining:
        a, b = remaining.pop(), remaining.pop()
        ia, ib = alpha.index(a), alpha.index(b)
        wiring[ia], wiring[ib] = b, a

    return "".join(wiring)


def make_plugboard(
    pairs: int, rng: Random | SystemRandom, alpha: str = ALPHA26
) -> List[str]:
    """Return *pairs* disjoint plug pairs (capped at half the alphabet)."""
    pool = list(alpha)
    rng.shuffle(pool)
    pairs = min(pairs, len(alpha) // 2)
    return [a + b for a, b in zip(pool[::2], pool[1::2])][:pairs]


def is_involution(wiring: str | bytes, alpha: str = ALPHA26) -> bool:
    """True if wiring[wiring[i]] == alpha[i] for all i and nothing maps to itself."""
    if isinstance(wiring, bytes):
        wiring = wiring.decode("ascii")
    for i, ch in enumerate(wiring):
        j = alpha.index(ch)
        if j == i or wiring[j] != alpha[i]:
            return False
    return True


def make_enigma_args(rng: Random | SystemRandom, pairs: int = 10) -> EnigmaArgs:
    """A complete random machine setting in the shape a settings form holds."""
    rotors = [
        (make_rotor(rng), str(rng.randrange(26)), str(rng.randrange(26)))
        for _ in range(3)
    ]
    return EnigmaArgs(
        refl_wiring=make_reflector(rng),
        rot1_wiring=rotors[0][0], rot1_notch=rotors[0][1], rot1_position=rotors[0][2],
        rot2_wiring=rotors[1][0], rot2_notch=rotors[1][1], rot2_position=rotors[1][2],
        rot3_wiring=rotors[2][0], rot3_notch=rotors[2][1], rot3_position=rotors[2][2],
        plugboard=" ".join(make_plugboard(pairs, rng)),
    )


# ─── output formatters ─────────────────────────────────────────────────


def emit_flags(args: EnigmaArgs) -> str:
    """Return the setting as `cryptdesk` command-line flags."""
    parts: List[str] = [f"--reflector {args.refl_wiring}"]
    for i in (1, 2, 3):
        wiring = getattr(args, f"rot{i}_wiring")
        notch = getattr(args, f"rot{i}_notch")
        position = getattr(args, f"rot{i}_position")
        parts.append(f"--rotor{i} {wiring} {notch} {position}")
    parts.append(f'--plugboard "{args.plugboard}"')
    return " \\\n  ".join(parts) + "\n"


def emit_text(args: EnigmaArgs) -> str:
    lines = [f"reflector   : {args.refl_wiring}"]
    for i in (1, 2, 3):
        lines.append(
            f"rotor {i}     : {getattr(args, f'rot{i}_wiring')}"
            f"  notch {getattr(args, f'rot{i}_notch'):>2}"
            f"  position {getattr(args, f'rot{i}_position'):>2}"
        )
    lines.append(f"plugboard   : {args.plugboard}")
    return "\n".join(lines) + "\n"


# ─── CLI ───────────────────────────────────────────────────────────────


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate a random Enigma setting.")
    p.add_argument(
        "--seed",
        type=int,
        help="Integer seed for deterministic output "
        "(omit for cryptographically strong randomness)",
    )
    p.add_argument(
        "--pairs", type=int, default=10, help="Plugboard pairs, 0-13 (default 10)"
    )
    p.add_argument(
        "--format",
        choices=["flags", "text"],
        default="flags",
        help="Output format (default flags)",
    )
    return p.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    setting = make_enigma_args(build_rng(args.seed), args.pairs)
    emit = emit_flags if args.format == "flags" else emit_text
    sys.stdout.write(emit(setting))


if __name__ == "__main__":
    main()
