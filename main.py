"""
LinSolver — Entry point.

Launch the Tkinter desktop application.
"""

from gui import LinSolverApp
from solver.logging_config import level_from_env, setup_logging


def main() -> None:
    setup_logging(level_from_env())
    app = LinSolverApp()
    app.mainloop()


if __name__ == "__main__":
    main()
