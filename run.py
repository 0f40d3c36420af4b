import os, sys

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
SRC_DIR = os.path.join(BASE_DIR, "src")
if SRC_DIR not in sys.path:
    sys.path.append(SRC_DIR)

from flappy.main import main

if __name__ == "__main__":
    sys.exit(main(base_dir=BASE_DIR))
