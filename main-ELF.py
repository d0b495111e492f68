# main-ELF.py
"""Equivalent lateral force runner: example building plus a parametric sweep."""
import logging
from pathlib import Path
import pandas as pd
from building_info_function import generate_configurations
from core.model_config import ConfigLoader
from core.analysis_runner import SeismicAnalysisRunner

def setup_logging():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

def save_results(results, result_dir):
    """Write spectrum and floor force tables for one analysis."""
    result_dir.mkdir(parents=True, exist_ok=True)
    results.spectrum_frame().to_csv(result_dir / 'response_spectrum.csv', index=False)
    results.floor_forces_frame().to_csv(result_dir / 'floor_forces.csv', index=False)

def main():
    setup_logging()
    logger = logging.getLogger(__name__)

    base_dir = Path(__file__).parent
    results_base = base_dir / "ELF_Results"
    results_base.mkdir(exist_ok=True)

    # Example building from YAML
    inputs = ConfigLoader.build_inputs(base_dir / "configs" / "example_building.yaml")
    results = SeismicAnalysisRunner.from_inputs(inputs).run()
    save_results(results, results_base / "example_building")
    logger.info(f"Example building: {results.summary()}")

    # Define parameter space
    site_classes = ['SC', 'SD', 'SE']
    n_stories_list = [3, 6, 10, 15]
    hazard_levels = [(0.5, 0.2), (0.8, 0.3), (1.2, 0.5)]

    # Fixed parameters
    plan_length = 24.0  # m
    plan_width = 18.0  # m

    total_configs = len(site_classes) * len(n_stories_list) * len(hazard_levels)
    config_count = 0
    all_results = []

    # Parameter loops
    for site_class in site_classes:
        for n_stories in n_stories_list:
            for ss, s1 in hazard_levels:
                config_count += 1

                # Create configuration name
                config_name = f"{site_class}_S{n_stories}_Ss{ss:.2f}_S1{s1:.2f}"
                logger.info(f"[{config_count}/{total_configs}] Running {config_name}")

                raw_config = {
                    "number_of_stories": n_stories,
                    "plan_length_m": plan_length,
                    "plan_width_m": plan_width,
                    "ss": ss,
                    "s1": s1,
                    "site_class": site_class,
                }

                try:
                    config = generate_configurations(raw_config)
                    inputs = ConfigLoader.build_inputs(config)
                    results = SeismicAnalysisRunner.from_inputs(inputs).run()
                except (KeyError, ValueError) as e:
                    logger.error(f"  Failed {config_name}: {e}")
                    continue

                save_results(results, results_base / config_name)
                all_results.append({'config': config_name, **results.summary()})

    df = pd.DataFrame(all_results)
    df.to_csv(results_base / 'summary.csv', index=False)
    logger.info(f"Completed {len(all_results)}/{total_configs} configurations")

if __name__ == "__main__":
    main()
