from .plot_signals import plot_signals

__all__ = ['plot_signals']
