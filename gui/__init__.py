from gui.app import LinSolverApp

__all__ = ["LinSolverApp"]
