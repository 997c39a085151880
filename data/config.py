"""
Configuration parameters for economic scenario generation
Reference models, time grid and validation settings
"""

# ============================================================================
# 1. TIME GRID
# ============================================================================
TIMESTEP = 1.0      # Years between grid points
ENDTIME = 30.0      # Projection horizon (years)

# Tolerances used when comparing grid times against the horizon
GRID_RELATIVE_TOLERANCE = 1.4901161193847656e-08  # sqrt(machine epsilon)
GRID_ABSOLUTE_TOLERANCE = 1e-12

# ============================================================================
# 2. INTEREST RATE MODELS
# ============================================================================
VASICEK = {
    'a': 0.136,         # Mean reversion speed
    'b': 0.0168,        # Long-run mean
    'sigma': 0.0119,    # Volatility
    'initial': 0.01,    # Initial short rate (continuously compounded)
}

COX_INGERSOLL_ROSS = {
    'a': 0.92,
    'b': 0.0168,
    'sigma': 0.0118,
    'initial': 0.01,
}

HULL_WHITE = {
    'a': 0.1,
    'sigma': 0.002,
    'flat_rate': 0.03,  # Flat continuously compounded curve
}

# Bump size for finite-difference forward rates off a discount curve
FORWARD_RATE_BUMP = 1e-4

# ============================================================================
# 3. EQUITY MODELS
# ============================================================================
BLACK_SCHOLES_MERTON = {
    'r': 0.01,          # Risk-free rate
    'q': 0.02,          # Dividend / borrow yield
    'sigma': 0.15,      # Volatility
    'initial': 100.0,   # Initial price
}

CONSTANT_ELASTICITY_OF_VARIANCE = {
    'r': 0.01,
    'q': 0.02,
    'sigma': 0.15,
    'gamma': 1.0,       # Elasticity (1.0 recovers proportional volatility)
    'initial': 100.0,
}

# ============================================================================
# 4. CORRELATION
# ============================================================================
COPULA_CORRELATION = 0.90   # Pairwise correlation for the reference copula
STUDENT_T_DEGREES_OF_FREEDOM = 4.0

# Margin keeping copula variates inside the open unit interval
COPULA_CLIP_EPS = 1e-12

# ============================================================================
# SIMULATION & VALIDATION PARAMETERS
# ============================================================================
NUM_SIMULATIONS = 10000     # Number of Monte Carlo paths
NUM_CORRELATED_TRAVERSALS = 1000
RANDOM_SEED = 42            # For reproducibility
SIGNIFICANCE_LEVEL = 0.05
OPTION_STRIKE = 100.0
