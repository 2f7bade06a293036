import sys
import os
import logging

# Configure the logger
logging.basicConfig(
    format='%(asctime)s - %(levelname)s - %(message)s',
    level=logging.INFO
)

# Get the root logger
logger = logging.getLogger()

# Add a FileHandler to log messages to a file
file_handler = logging.FileHandler('color_sort_log.txt', mode='a')  # Append mode
file_handler.setLevel(logging.DEBUG)
file_handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
logger.addHandler(file_handler)

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '.')))


def render(session):
    level = session.level
    print(f"\nLevel {level.level_index} - {percent_label(level.completion())} complete")
    for i, tube in enumerate(level.tubes):
        marker = "*" if tube.clicked else " "
        contents = " ".join(f"{color.to_rgb_u32():06x}x{amount:g}" for color, amount in tube.segments)
        print(f"{marker}[{tube.keycode or '-'}] Tube {i + 1} ({percent_label(tube.completion_fraction())}): {contents}")


def play(session):
    """
    Read tube shortcut keys from stdin and feed them into the session.

    Besides the keys, `restart`, `skip`, `next` and `quit` are understood.
    """
    render(session)
    for line in sys.stdin:
        for token in line.split():
            command = token.lower()
            if command == "quit":
                return
            elif command == "restart":
                session.ui.restart = True
            elif command == "skip":
                session.ui.skip_level = True
            elif command == "next":
                if not session.next_level():
                    print("Level is not solved yet.")
            else:
                index = tube_for_key(session.level.tubes, token)
                if index is None:
                    print(f"Unknown key {token!r}.")
                    continue
                session.activate(index)
            session.apply_ui_flags()
        render(session)
        if session.is_won():
            print("🎉 Level solved! Type `next` to continue.")


if __name__ == "__main__":
    from color_sort import GameConfig, GameSession, percent_label, tube_for_key

    stage = {"tube_capacity": 4, "num_empty_tubes": 2, "start_level": 1}
    config = GameConfig.from_dict(stage)
    logger.info(f"Starting color sort with {config.num_colors} colors, capacity {config.tube_capacity}.")
    play(GameSession(config))
