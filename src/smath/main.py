import logging
import pprint

from .config.sampling_config import SamplingConfig
from .functions.catalog import available_functions, get_function
from .functions.properties import verify_function
from .geometry.function_geometry import normal_line_at, tangent_line_at
from .geometry.graph import function_frame, graph_length
from .utils.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def main(numeric_type: str = 'float64'):
    """
    Demonstration run: verify every catalogued function and sample its graph.
    """
    # --- Setup ---
    setup_logging(level=logging.INFO)
    config = SamplingConfig(numeric_type=numeric_type)
    ops = config.backend

    print("--- smath function and geometry demo ---")
    print(f"Numeric type: {ops.name}\n")

    for name in available_functions():
        function = get_function(name)

        # --- Metadata ---
        print(f"Function: {function.PLAIN_TEXT_FORMULA}")
        pprint.pprint(function.describe(ops))

        # --- Verification ---
        report = verify_function(function, config)
        status = "✅ passed" if report.passed else "❌ failed"
        print(f"Verification {status} (max derivative error {report.derivative_max_error:.2e})")

        # --- Lines at the origin and at 1 ---
        for x in (ops.zero, ops.one):
            print(f"  x={x}: tangent={tangent_line_at(function, x, ops=ops)}, "
                  f"normal={normal_line_at(function, x, ops=ops)}")

        # --- Sampled graph ---
        frame = function_frame(function, config.plot_from, config.plot_to, config.plot_count, ops=ops)
        print(frame.to_string(index=False))
        print(f"  Graph length on [{config.plot_from}, {config.plot_to}): "
              f"{graph_length(zip(frame['x'], frame['y'])):.6f}")
        print("-" * 30)

    logger.info("Demo complete")


if __name__ == "__main__":
    main()
