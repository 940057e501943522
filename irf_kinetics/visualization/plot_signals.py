import matplotlib.pyplot as plt
import numpy as np


def plot_signals(time, signals, labels=None, title='Simulated Signals', filepath=None):
    """Plot one signal or column-stacked signals; save to ``filepath`` or show."""
    signals = np.asarray(signals)
    fig = plt.figure()
    if signals.ndim == 1:
        plt.plot(time, signals, label=labels[0] if labels else None)
        if labels:
            plt.legend()
    else:
        for i in range(signals.shape[1]):
            plt.plot(time, signals[:, i], label=labels[i] if labels else f'Component {i+1}')
        plt.legend()
    plt.xlabel('Time')
    plt.ylabel('Signal')
    plt.title(title)
    if filepath:
        fig.savefig(filepath)
        plt.close(fig)
    else:
        plt.show()
    return fig
