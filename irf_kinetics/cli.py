import argparse
import csv
import logging
import sys

import numpy as np

from irf_kinetics.config import DEFAULT_CONFIG, POLICIES, load_config
from irf_kinetics.exceptions import KineticsError
from irf_kinetics.logging_config import setup_logging
from irf_kinetics.models import KINETIC_MODELS, PARAMETER_CLASSES, PARAMETER_METADATA, default_vector
from irf_kinetics.simulators import BACKENDS, ForwardSimulator

logger = logging.getLogger("irf_kinetics.cli")


def build_parser():
    parser = argparse.ArgumentParser(description='IRF-convolved kinetics simulator')
    parser.add_argument('--model', type=str, default='rise1_fall2', choices=list(KINETIC_MODELS),
                        help='Kinetic model variant')
    parser.add_argument('--params', type=float, nargs='+', metavar='VALUE',
                        help='Full parameter vector (fwhm t0 ...); defaults from the model metadata')
    parser.add_argument('--tmin', type=float, default=-500)
    parser.add_argument('--tmax', type=float, default=3000)
    parser.add_argument('--dt', type=float, default=10)

    # Quadrature configuration
    parser.add_argument('--config', help='JSON file with quadrature settings')
    parser.add_argument('--policy', choices=POLICIES, help='Causality policy of the quadrature sweep')
    parser.add_argument('--backend', choices=BACKENDS, default='quadrature')
    parser.add_argument('--step', type=float, help='Quadrature step')
    parser.add_argument('--window-start', type=float, help='Start of the fixed integration window')
    parser.add_argument('--window-end', type=float, help='End of the fixed integration window')
    parser.add_argument('--causal-span', type=float, help='Length of the causal-start window')

    # Output
    parser.add_argument('--output', help='CSV file for the simulated signal (stdout if omitted)')
    parser.add_argument('--plot', help='Save a plot of the simulated signal to this image file')
    parser.add_argument('--list-models', action='store_true', help='List models and their parameter layouts')
    parser.add_argument('--log-file', help='Write a DEBUG log to this file')
    parser.add_argument('--verbose', action='store_true')
    return parser


def list_models(stream=None):
    stream = stream or sys.stdout
    for name, metadata in PARAMETER_METADATA.items():
        stream.write(f"{name} ({PARAMETER_CLASSES[name].__name__})\n")
        for index, (field, default, description) in enumerate(metadata):
            stream.write(f"  [{index}] {field:<10} default={default:<8g} {description}\n")


def write_signal_csv(time, signal, stream):
    writer = csv.writer(stream)
    writer.writerow(['Time', 'Signal'])
    writer.writerows(zip(time.tolist(), signal.tolist()))


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_file, level=logging.DEBUG if args.verbose else logging.INFO)

    if args.list_models:
        list_models()
        return 0
    if args.dt <= 0 or args.tmax <= args.tmin:
        parser.error('require dt > 0 and tmax > tmin')

    try:
        config = load_config(args.config) if args.config else DEFAULT_CONFIG
        config = config.replace(
            policy=args.policy, step=args.step, window_start=args.window_start,
            window_end=args.window_end, causal_span=args.causal_span,
        )
        vector = args.params if args.params is not None else default_vector(args.model)
        params = PARAMETER_CLASSES[args.model].from_vector(vector)
    except (OSError, ValueError, KineticsError) as e:
        logger.error("Error: %s", e)
        return 1

    logger.info("Model: %s %s", args.model, params.describe())
    logger.info("Backend: %s, policy: %s, step: %s", args.backend, config.policy, config.step)

    time = np.arange(args.tmin, args.tmax + args.dt / 2, args.dt)
    simulator = ForwardSimulator(args.model, config=config, backend=args.backend)
    try:
        signal = simulator.simulate(time, params)
    except (ValueError, KineticsError, ArithmeticError) as e:
        logger.error("Simulation failed: %s", e)
        return 1
    if not np.all(np.isfinite(signal)):
        logger.warning("Simulated signal contains non-finite values.")

    if args.output:
        with open(args.output, 'w', newline='') as f:
            write_signal_csv(time, signal, f)
        logger.info("Signal written to %s", args.output)
    else:
        write_signal_csv(time, signal, sys.stdout)

    if args.plot:
        import matplotlib
        matplotlib.use('Agg')
        from irf_kinetics.visualization import plot_signals
        plot_signals(time, signal, labels=[args.model], title='IRF-convolved signal', filepath=args.plot)
        logger.info("Plot saved to %s", args.plot)
    return 0


if __name__ == '__main__':
    sys.exit(main())
