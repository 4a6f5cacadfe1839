#!/usr/bin/env python3
"""
Evaluate the unbeatable TicTacToe engine, or play against it.

Usage:
    python eval.py                          # random, perfect-play and exhaustive checks
    python eval.py --games 500 --seed 1
    python eval.py --exhaustive-states --save-dir runs/eval
    python eval.py --play                   # interactive game
    python eval.py --play --computer-first --delay 0
"""

import sys
import time
import json
import argparse
from dataclasses import asdict
from pathlib import Path

# Add src to path
sys.path = [str(Path(__file__).parent / "src")] + sys.path

from unbeatable_ttt import (
    EvalConfig,
    PlayConfig,
    Result,
    GameController,
    eval_vs_random,
    eval_perfect_play,
    eval_all_human_strategies,
    eval_best_move_all_states,
    clear_cache,
    cache_size,
    format_board,
    history_summary,
    empty_cell_indices,
)


def print_scoreboard(history):
    """Print win/tie/loss counts."""
    s = history_summary(history)
    print(f"Scoreboard - You: {s['win']}  Ties: {s['tie']}  Computer: {s['lose']}")


def ask_yes_no(prompt: str) -> bool:
    answer = input(prompt).strip().lower()
    return answer in ("y", "yes")


def play_interactive(config: PlayConfig):
    """Play games against the engine until the user stops."""
    controller = GameController(config.human_goes_first)

    print("\n=== Interactive Game ===")
    print("Enter moves as numbers 0-8:")
    print(format_board(controller.session.board, show_indices=True))
    print()

    while True:
        session = controller.session

        if session.is_game_over:
            print(format_board(session.board))
            if session.result == Result.WIN:
                print("\nYou win!")
            elif session.result == Result.LOSE:
                print("\nComputer wins!")
            else:
                print("\nDraw!")
            print_scoreboard(session.history)

            try:
                if not ask_yes_no("\nPlay again? [y/N] "):
                    return
                goes_first = ask_yes_no("Do you want to go first? [y/N] ")
            except (EOFError, KeyboardInterrupt):
                print()
                return
            controller.reset(goes_first)
            print()
            continue

        print(controller.status_text())
        print(format_board(session.board, show_indices=True))
        print()

        if controller.is_human_turn:
            moves = empty_cell_indices(session.board)
            try:
                action = int(input(f"Your move ({moves}): "))
            except ValueError:
                print("Invalid move, try again")
                continue
            except (EOFError, KeyboardInterrupt):
                print("\nGame aborted")
                return
            if not controller.submit_human_move(action):
                print("Invalid move, try again")
                continue
        else:
            time.sleep(config.computer_move_delay)
            action = controller.play_computer_move()
            print(f"Computer plays: {action}")
        print()


def run_evaluation(config: EvalConfig):
    """Run the evaluation suite and return a summary dict."""
    clear_cache()
    summary = {"config": asdict(config)}

    print(f"\nvs Random ({config.games} games)...")
    rnd = eval_vs_random(games=config.games, seed=config.seed)
    print(f"  Human wins:   {rnd['human_w']:.2%}")
    print(f"  Draws:        {rnd['human_d']:.2%}")
    print(f"  Human losses: {rnd['human_l']:.2%}")
    print(f"  Game length:  {rnd['len_mean']:.2f} +/- {rnd['len_std']:.2f}")
    summary["vs_random"] = rnd

    print("\nPerfect play (both sides minimax)...")
    perfect = eval_perfect_play()
    print(f"  Human first:    {perfect['human_first']}")
    print(f"  Computer first: {perfect['computer_first']}")
    summary["perfect_play"] = perfect

    print("\nAll human strategies...")
    for human_goes_first in (True, False):
        key = "human_first" if human_goes_first else "computer_first"
        res = eval_all_human_strategies(human_goes_first)
        print(f"  {key}: {res['games']} games | W {res['win']} / D {res['tie']} / L {res['lose']}")
        summary[f"strategies_{key}"] = res

    if config.exhaustive_states:
        print(f"\nbest_move on all legal states (>= {config.min_marks} marks)...")
        st = eval_best_move_all_states(min_marks=config.min_marks)
        print(f"  States:        {st['n_states']}")
        print(f"  Illegal moves: {st['illegal_moves']}")
        summary["all_states"] = st

    summary["cached_positions"] = cache_size()

    return summary


def main():
    parser = argparse.ArgumentParser(description="Evaluate or play the TicTacToe engine")
    parser.add_argument("--play", action="store_true", help="Play interactive game")
    parser.add_argument("--computer-first", action="store_true", help="Computer plays X")
    parser.add_argument("--delay", type=float, default=PlayConfig.computer_move_delay,
                        help="Computer thinking time in seconds")
    parser.add_argument("--games", type=int, default=100, help="Games vs random human")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    parser.add_argument("--exhaustive-states", action="store_true",
                        help="Check best_move on every legal state (slow)")
    parser.add_argument("--min-marks", type=int, default=0,
                        help="Skip states with fewer marks in the exhaustive check")
    parser.add_argument("--save-dir", type=str, default=None, help="Directory for summary.json")

    args = parser.parse_args()

    if args.play:
        play_interactive(PlayConfig(
            human_goes_first=not args.computer_first,
            computer_move_delay=args.delay,
        ))
        return

    config = EvalConfig(
        seed=args.seed,
        games=args.games,
        exhaustive_states=args.exhaustive_states,
        min_marks=args.min_marks,
        save_dir=args.save_dir,
    )

    print("=== Evaluation ===")
    summary = run_evaluation(config)

    if config.save_dir:
        save_dir = Path(config.save_dir)
        save_dir.mkdir(parents=True, exist_ok=True)
        with open(save_dir / "summary.json", "w") as f:
            json.dump(summary, f, indent=2)
        print(f"\n✓ Summary saved to {save_dir / 'summary.json'}")

    strategies_won = (summary["strategies_human_first"]["win"]
                      + summary["strategies_computer_first"]["win"])
    if strategies_won or summary["vs_random"]["human_w"] > 0:
        print("\n✗ The human won at least one game")
        sys.exit(1)
    print("\n✅ The human never won")


if __name__ == "__main__":
    main()
