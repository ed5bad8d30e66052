"""
Forward-AD Configuration

Policy switches and numeric constants shared by the derivative rules.
Values are read at call time, so a test (or an embedding application) can
flip a switch with ``monkeypatch.setattr(config, ...)``.

Policies:
    SQRT_ZERO_GUARD:
        sqrt at val == 0 returns {0, 0} instead of an infinite tangent.
    POW_LEGACY_LOG_GUARD:
        Enable the d/d(exponent) term of pow only when base <= 0. This is the
        historical (NaN-prone) guard; the default enables it for base > 0,
        where ln(base) is defined.
    ATAN2_TEXTBOOK_PARTIALS:
        atan2(a, b) by default uses d/da = -b/(a^2+b^2), d/db = a/(a^2+b^2).
        When True the partials of atan2(y, x) are used instead:
        d/da = b/(a^2+b^2), d/db = -a/(a^2+b^2).

Numerics:
    GAMMA_FD_REL_STEP:
        Relative perturbation for the central finite difference behind the
        tgamma/lgamma tangents: f'(x) ~ (f(x(1+s)) - f(x(1-s))) / (2 s x).
    BUMP_STEP, CHECK_RTOL:
        Defaults of the AD-vs-bumping cross-check (`seeds.bump_derivative`
        and the ``python -m forward_ad check`` command).
"""

SQRT_ZERO_GUARD: bool = True
POW_LEGACY_LOG_GUARD: bool = False
ATAN2_TEXTBOOK_PARTIALS: bool = False

GAMMA_FD_REL_STEP: float = 0.01

BUMP_STEP: float = 1e-6
CHECK_RTOL: float = 1e-6
