"""Package entry point for ``python -m orpg_converter``.

WHY: Users run the converter as ``python -m orpg_converter chat.json``
without installing the console script. Python's ``-m`` flag looks for
``__main__.py`` inside the package and executes it.

HOW: Delegates straight to the CLI's main() function.
"""

from orpg_converter.cli import main

if __name__ == "__main__":
    main()
