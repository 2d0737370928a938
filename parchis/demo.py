"""Feed a human-mode board with random placements, standing in for the authority."""

import argparse
import time

import numpy as np

from parchis.coordinates import CORRIDOR_LEN, PIECES, TRACK_LEN, Color
from parchis.messages import Session
from parchis.parchis import Board


def random_message(rng):
    kind = rng.choice(["AtBase", "OnTrack", "OnTrack", "OnTrack", "InCorridor", "AtGoal"])
    state = {"kind": str(kind)}
    if kind == "OnTrack":
        state["index"] = int(rng.integers(0, TRACK_LEN))
    elif kind == "InCorridor":
        state["index"] = int(rng.integers(0, CORRIDOR_LEN))
    return {
        "color": Color(int(rng.integers(0, len(Color)))).name,
        "pieceId": int(rng.integers(0, PIECES)),
        "state": state,
        "dice": int(rng.integers(1, 7)),
    }


def main():
    parser = argparse.ArgumentParser(description="Random placement feed for the Parchís display.")
    parser.add_argument("--color", default="RED", choices=[c.name for c in Color], help="Color of this player.")
    parser.add_argument("--seed", type=int, default=43)
    parser.add_argument("--interval", type=float, default=0.8, help="Seconds between updates.")
    parser.add_argument("--updates", type=int, default=200)
    args = parser.parse_args()

    def on_select(event):
        print(f"Selection -> authority: {event.to_message()}")

    session = Session(player_id=0, color=Color[args.color], my_turn=True)
    board = Board(render_mode="human", session=session, on_select=on_select)
    rng = np.random.default_rng(args.seed)

    print(f"Starting Parchís display as {args.color}")

    sent = 0
    next_update = time.monotonic()
    while sent < args.updates:
        if time.monotonic() >= next_update:
            message = random_message(rng)
            print(f"Authority: {message}")
            board.handle_message(message)
            sent += 1
            next_update += args.interval
        if not board.run_frame():
            break

    board.close()
    print("\nDemo finished.")


if __name__ == "__main__":
    main()
