from loguru import logger

import main
from relay_planner.core.config import Settings
from relay_planner.core.logging import setup_logging
from relay_planner.services import GroupKey


def make_settings(**overrides):
    values = dict(
        roster_size=3,
        rounds=2,
        submission_cap=1,
        max_tries=50,
        seed=5,
        group_by=GroupKey.SENDER,
        participant_names=("Anna", "Bram", "Chris"),
        mode="search",
        log_level="INFO",
        log_path="logs/relay_planner.log",
        log_rotation="100 KB",
    )
    values.update(overrides)
    return Settings(**values)


def test_search_mode_prints_grid(capsys):
    status = main.run(make_settings())
    output = capsys.readouterr().out
    assert status == 0
    assert output.startswith("Week 1")
    assert "Anna→" in output


def test_generate_mode_prints_grid(capsys):
    status = main.run(make_settings(mode="generate", submission_cap=0))
    output = capsys.readouterr().out
    assert status == 0
    assert "Week 2" in output


def test_nothing_found_returns_error_status(capsys):
    status = main.run(make_settings(submission_cap=0, max_tries=10))
    assert status == 1
    assert capsys.readouterr().out == ""


def test_setup_logging_writes_debug_file(tmp_path):
    log_file = tmp_path / "planner.log"
    setup_logging("WARNING", str(log_file))
    logger.bind(attempt=1).debug("candidate checked")
    logger.remove()
    assert "candidate checked" in log_file.read_text()


def test_setup_logging_creates_log_directory(tmp_path):
    log_file = tmp_path / "nested" / "logs" / "planner.log"
    setup_logging("WARNING", str(log_file), rotation="1 MB")
    logger.info("planner starting...")
    logger.remove()
    assert log_file.exists()
    assert "planner starting" in log_file.read_text()
