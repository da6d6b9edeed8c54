from dataclasses import dataclass

from ..numerics.backend import NumericBackend, available_backends, get_backend


@dataclass
class SamplingConfig:
    """Settings for sampling functions and verifying their metadata."""

    numeric_type: str = 'float64'         # Backend name, see available_backends()

    # Property verification
    sample_count: int = 64                # Inputs checked per property
    sample_bound: float = 10.0            # Inputs drawn from [-bound, bound]
    derivative_tolerance: float = 1e-5    # Max finite-difference gradient error

    # Graph sampling for the demo
    plot_from: float = 0.0
    plot_to: float = 6.283185307179586    # 2π
    plot_count: int = 16

    def __post_init__(self):
        """Validate settings."""
        if self.numeric_type not in available_backends():
            raise ValueError(f"Unknown numeric type '{self.numeric_type}'. "
                             f"Available: {available_backends()}")
        if self.sample_count < 2:
            raise ValueError(f"sample_count must be at least 2, got {self.sample_count}")
        if self.sample_bound <= 0:
            raise ValueError(f"sample_bound must be positive, got {self.sample_bound}")
        if self.derivative_tolerance <= 0:
            raise ValueError(f"derivative_tolerance must be positive, got {self.derivative_tolerance}")
        if self.plot_count < 1:
            raise ValueError(f"plot_count must be positive, got {self.plot_count}")
        if self.plot_to <= self.plot_from:
            raise ValueError(f"plot_to ({self.plot_to}) must be greater than plot_from ({self.plot_from})")

    @property
    def backend(self) -> NumericBackend:
        return get_backend(self.numeric_type)
