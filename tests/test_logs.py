import importlib
import os
import tempfile
import unittest

from loguru import logger

import depparse.utils.logs
from depparse.data.tagger import CallableTagger
from depparse.parsing import parse_samples
from depparse.utils.logs import define_log_level, setup_logging


def quiet_parse():
    return parse_samples(["the cat sat"], tagger=CallableTagger(lambda s: [(w, 'Noun') for w in s.split()]))


class TestLogs(unittest.TestCase):

    def tearDown(self):
        logger.remove()
        logger.disable("depparse")

    def test_file_sink(self):
        with tempfile.TemporaryDirectory() as tmp:
            log = define_log_level(print_level="WARNING", logfile_level="DEBUG", name="unit", log_dir=tmp)
            log.debug("written to file only")
            files = os.listdir(tmp)
            self.assertEqual(len(files), 1)
            self.assertTrue(files[0].startswith("unit_"))
            with open(os.path.join(tmp, files[0]), encoding="utf-8") as f:
                self.assertIn("written to file only", f.read())
            # drop the file sink before the directory goes away
            logger.remove()

    def test_setup_logging_from_config(self):
        with tempfile.TemporaryDirectory() as tmp:
            setup_logging({'logging': {'print_level': 'ERROR', 'logfile_level': 'INFO', 'log_dir': tmp}})
            quiet_parse()
            files = os.listdir(tmp)
            self.assertEqual(len(files), 1)
            self.assertTrue(files[0].startswith("depparse_"))
            with open(os.path.join(tmp, files[0]), encoding="utf-8") as f:
                self.assertIn("Parsed 1 sentences", f.read())
            logger.remove()

    def test_import_keeps_host_handlers(self):
        messages = []
        logger.add(messages.append, format="{message}")
        importlib.reload(depparse.utils.logs)
        logger.info("host application message")
        self.assertEqual([m.strip() for m in messages], ["host application message"])

    def test_package_is_silent_until_enabled(self):
        logger.disable("depparse")
        messages = []
        logger.add(messages.append, level="DEBUG", format="{name}: {message}")
        quiet_parse()
        self.assertEqual(messages, [])

        logger.enable("depparse")
        quiet_parse()
        self.assertTrue(messages)
        self.assertTrue(all(m.startswith("depparse.") for m in messages))


if __name__ == '__main__':
    unittest.main()
