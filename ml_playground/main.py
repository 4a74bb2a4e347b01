import datetime
import logging
import os
from pathlib import Path

import yaml
from dotenv import load_dotenv

from ml_playground.data_handling.exceptions import DatasetError
from ml_playground.logging_config import setup_logging
from ml_playground.pipeline.exceptions import ConfigurationError
from ml_playground.pipeline.playground_session import PlaygroundSession
from ml_playground.predictions.exceptions import PredictionInputError
from ml_playground.predictions.training.regression_model_trainer import RegressionModelTrainer
from ml_playground.visualisations.model_plotting import ModelPlotter

DEFAULT_CONFIG_PATH = Path(__file__).parent / "../config/config.yml"


def load_app_config(config_path=DEFAULT_CONFIG_PATH):
    config_path = Path(config_path)
    try:
        load_dotenv(dotenv_path=config_path.parent / ".env")
        config = yaml.safe_load(config_path.read_text()) or {}
    except FileNotFoundError:
        logging.error(f"CRITICAL: Config file not found at {config_path}")
        raise

    for experiment in config.get("experiments", []):
        if "dataset" in experiment:
            experiment["dataset"] = os.path.expandvars(experiment["dataset"])

    return config


def log_report(name, result):
    analysis = result.analysis
    logging.info(f"[{name}] Overall grade: {analysis.overall_grade} ({analysis.overall_score}/100)")
    logging.info(f"[{name}] {analysis.interpretive_blurb}")
    for entry in analysis.metric_breakdown:
        contribution = f" [score {entry.score_contribution}]" if entry.score_contribution is not None else ""
        logging.info(f"[{name}] {entry.metric_name} = {entry.value}{contribution}: {entry.interpretation}")


def run_experiment(experiment: dict, run_output_dir: str):
    name = experiment.get("name", "experiment")
    logging.info(f"--- Starting experiment: {name} ---")

    plotter = ModelPlotter(images_dir=os.path.join(run_output_dir, name))
    session = PlaygroundSession(trainer=RegressionModelTrainer(model_plotter=plotter))

    if "sample" in experiment:
        session.load_sample(experiment["sample"])
    elif "dataset" in experiment:
        session.load_dataset(experiment["dataset"])
    else:
        raise ConfigurationError(f"Experiment '{name}' needs either a 'sample' or a 'dataset' entry.")

    session.configure(target_column=experiment.get("target"),
                      feature_columns=experiment.get("features", []),
                      model_type=experiment.get("model_type", "simple"))

    result = session.train()
    log_report(name, result)

    if experiment.get("predict"):
        prediction = session.predict(experiment["predict"])
        logging.info(f"[{name}] Live prediction for {experiment['predict']}: {prediction:.2f}")

    return result


def main(config_path=DEFAULT_CONFIG_PATH):
    config = load_app_config(config_path)
    setup_logging(getattr(logging, str(config.get("logging", {}).get("level", "INFO")).upper(), logging.INFO))

    timestamp = datetime.datetime.now().strftime('%Y-%m-%d_%H-%M-%S')
    run_output_dir = os.path.join(config.get("output_dir", "runs"), timestamp)
    os.makedirs(run_output_dir, exist_ok=True)

    results = {}
    for experiment in config.get("experiments", []):
        name = experiment.get("name", "experiment")
        try:
            results[name] = run_experiment(experiment, run_output_dir)
        except (DatasetError, ConfigurationError, PredictionInputError) as e:
            logging.error(f"Experiment {name} failed: {e}")
        except Exception as e:
            logging.exception(f"Critical unexpected error in experiment {name}: {e}")
        finally:
            logging.info(f"Experiment {name} finished!")

    return results


if __name__ == '__main__':
    main()
