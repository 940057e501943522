import numpy as np
from irf_kinetics.config import QuadratureConfig
from irf_kinetics.models import Rise1Fall2, rise1_fall2, heaviside_gated
from irf_kinetics.simulators import ForwardSimulator
from irf_kinetics.visualization import plot_signals

# Define time points
time = np.arange(-500, 3000, 5.0)

# True parameters (fwhm, t0, tau_r1, i_f1, tau_f1, i_f2, tau_f2, y0_f, amplitude)
params_true = Rise1Fall2(fwhm=120, t0=0, tau_r1=40, i_f1=0.7, tau_f1=250,
                         i_f2=0.3, tau_f2=1800, y0_f=0.05, amplitude=1.0)

# Unbroadened kinetics and the two convolution backends
kinetics = heaviside_gated(rise1_fall2)(params_true, time)
config = QuadratureConfig(step=1.0)
quadrature = ForwardSimulator('rise1_fall2', config=config).simulate(time, params_true)
spectral = ForwardSimulator('rise1_fall2', backend='discrete').simulate(time, params_true)
plot_signals(time, np.column_stack([kinetics, quadrature, spectral]),
             labels=['Kinetics', 'Quadrature', 'FFT'], title='IRF-convolved Signals')

# Add noise
np.random.seed(0)
signal_noisy = quadrature + 0.02 * np.random.randn(*quadrature.shape)

# Residuals an external fitter would minimise
simulator = ForwardSimulator('rise1_fall2', config=config)
residuals = simulator.residuals(time, signal_noisy, params_true)
print("RMS residual:", np.sqrt(np.mean(residuals**2)))
