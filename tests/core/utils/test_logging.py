import logging

from diff_object_comparer import DiffObjectComparer
from diff_object_comparer.core.utils.logging import setup_diff_object_comparer_logging


def test_setup_installs_single_stdout_handler(restore_logger, capsys):
    setup_diff_object_comparer_logging(logging.INFO)
    setup_diff_object_comparer_logging(logging.INFO)

    assert len(restore_logger.handlers) == 1
    assert restore_logger.propagate is False

    restore_logger.info("hello")

    assert capsys.readouterr().out == "[Diff Object Comparer] [INFO] hello\n"


def test_setup_accepts_level_names(restore_logger):
    setup_diff_object_comparer_logging("debug")

    assert restore_logger.level == logging.DEBUG


def test_divergences_are_logged_at_debug(restore_logger, capsys):
    setup_diff_object_comparer_logging(logging.DEBUG)

    DiffObjectComparer().compare([1, 2], [1, 3])

    out = capsys.readouterr().out
    assert "[DEBUG] Property 'Root[1]' is not equal in instances: left value = '2', right value = '3'" in out
    assert "[DEBUG] Compared 'Root': 1 divergence(s)" in out
