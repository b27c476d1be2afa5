"""Run the replay-gain CLI with ``python -m replay_gain``."""

from replay_gain.cli import main

if __name__ == "__main__":
    main()
