# MIT License (see LICENSE)
from .cli import main

main()
