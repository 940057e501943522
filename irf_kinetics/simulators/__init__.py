from .forward_simulator import BACKENDS, ForwardSimulator

__all__ = ['BACKENDS', 'ForwardSimulator']
