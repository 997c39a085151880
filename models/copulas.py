"""
Copula samplers used to correlate scenario generators.

A copula here is anything with a ``dim`` attribute and a
``sample(rng, n)`` method returning a (dim, n) array of variates with
uniform(0, 1) marginals. Rows belong to components (generators), columns
to time steps.
"""

import numpy as np
from scipy.linalg import cholesky
from scipy.stats import norm
from scipy.stats import t as tdist

from data.config import COPULA_CLIP_EPS


def clip01(u, eps=COPULA_CLIP_EPS):
    """Clip values to the open unit interval (eps, 1-eps)."""
    return np.clip(u, eps, 1.0 - eps)


def _validated_correlation(correlation):
    corr = np.atleast_2d(np.asarray(correlation, dtype=float))
    if corr.shape[0] != corr.shape[1]:
        raise ValueError(f"Correlation matrix must be square. Got shape {corr.shape}")
    if not np.allclose(corr, corr.T):
        raise ValueError("Correlation matrix must be symmetric.")
    if not np.allclose(np.diag(corr), 1.0):
        raise ValueError("Correlation matrix must have a unit diagonal.")
    return corr


class GaussianCopula:
    """
    Gaussian copula with a given correlation matrix.

    Sampling:
        Z = L @ X,  X ~ N(0, I),  L Lᵀ = Σ
        U = Φ(Z)
    """

    def __init__(self, correlation):
        self.correlation = _validated_correlation(correlation)
        self.dim = self.correlation.shape[0]
        try:
            self.cholesky = cholesky(self.correlation, lower=True)
        except np.linalg.LinAlgError as e:
            raise ValueError("Correlation matrix is not positive definite.") from e

    def sample(self, rng, n):
        x = rng.standard_normal((self.dim, n))
        z = self.cholesky @ x
        return clip01(norm.cdf(z))


class StudentTCopula:
    """
    Student-t copula with correlation matrix Σ and ν degrees of freedom.

    Z = L @ X / √(W/ν) with W ~ χ²(ν) shared across components, U = t_ν(Z).
    """

    def __init__(self, correlation, nu):
        if nu <= 0:
            raise ValueError(f"degrees of freedom must be positive, got {nu}")
        self.correlation = _validated_correlation(correlation)
        self.dim = self.correlation.shape[0]
        self.nu = nu
        try:
            self.cholesky = cholesky(self.correlation, lower=True)
        except np.linalg.LinAlgError as e:
            raise ValueError("Correlation matrix is not positive definite.") from e

    def sample(self, rng, n):
        x = rng.standard_normal((self.dim, n))
        w = rng.chisquare(self.nu, size=n)
        z = (self.cholesky @ x) / np.sqrt(w / self.nu)
        return clip01(tdist.cdf(z, self.nu))


class IndependenceCopula:
    """Independent uniform marginals."""

    def __init__(self, dim):
        if dim < 1:
            raise ValueError(f"dim must be at least 1, got {dim}")
        self.dim = dim

    def sample(self, rng, n):
        return clip01(rng.random((self.dim, n)))
