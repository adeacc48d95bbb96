import json
import logging
from datetime import datetime
from pathlib import Path

from taskpad import helpers
from taskpad.helpers import DateUtil


class TestHelpers:
    DEFAULTS = {
        'log_level': 'info',
        'sort_by_due_date': '0'
    }

    def test_get_uuid(self):
        uuid = helpers.get_uuid()
        assert len(uuid) == 36
        assert uuid != helpers.get_uuid()

    def test_is_blank(self):
        assert helpers.is_blank(None) is True
        assert helpers.is_blank('') is True
        assert helpers.is_blank(' \t\n') is True
        assert helpers.is_blank(' x ') is False

    def test_markdown_to_html(self):
        html = helpers.markdown_to_html('Buy **milk**\n\n- eggs\n- bread')
        assert '<strong>milk</strong>' in html
        assert '<li>eggs</li>' in html

    def test_folders(self, tmp_path: Path, monkeypatch):
        monkeypatch.setattr(helpers, 'DATA_LOCATION', tmp_path / '.taskpad')
        assert helpers.settings_folder() == tmp_path / '.taskpad'
        assert helpers.pictures_folder() == tmp_path / '.taskpad' / 'Pictures'
        assert helpers.log_folder() == tmp_path / '.taskpad' / 'Logs'
        assert helpers.pictures_folder().is_dir()
        assert helpers.log_folder().is_dir()

    def test_merge_settings(self, tmp_path: Path):
        conf_file = tmp_path / 'conf.json'
        settings = helpers.merge_settings(TestHelpers.DEFAULTS, conf_file)
        assert settings == TestHelpers.DEFAULTS
        assert settings is not TestHelpers.DEFAULTS

        with open(conf_file, 'w') as fp:
            json.dump({'log_level': 'debug', 'unknown': 'ignored'}, fp)
        settings = helpers.merge_settings(TestHelpers.DEFAULTS, conf_file)
        assert settings == {'log_level': 'debug', 'sort_by_due_date': '0'}
        assert TestHelpers.DEFAULTS['log_level'] == 'info'

    def test_merge_invalid_settings(self, tmp_path: Path, caplog):
        conf_file = tmp_path / 'conf.json'
        conf_file.write_text('{"log_level": ')
        settings = helpers.merge_settings(TestHelpers.DEFAULTS, conf_file)
        assert settings == TestHelpers.DEFAULTS
        assert any(record.levelno == logging.CRITICAL for record in caplog.records)

        conf_file.write_text('["debug"]')
        settings = helpers.merge_settings(TestHelpers.DEFAULTS, conf_file)
        assert settings == TestHelpers.DEFAULTS

    def test_merge_unreadable_settings(self, tmp_path: Path, caplog):
        conf_file = tmp_path / 'conf.json'
        conf_file.write_bytes(b'{"log_level": "\xff"}')
        settings = helpers.merge_settings(TestHelpers.DEFAULTS, conf_file)
        assert settings == TestHelpers.DEFAULTS
        assert any(record.levelno == logging.CRITICAL for record in caplog.records)

        conf_dir = tmp_path / 'conf_dir.json'
        conf_dir.mkdir()
        settings = helpers.merge_settings(TestHelpers.DEFAULTS, conf_dir)
        assert settings == TestHelpers.DEFAULTS

        conf_file.write_text('{"log_level": "débug"}', encoding='utf-8')
        settings = helpers.merge_settings(TestHelpers.DEFAULTS, conf_file)
        assert settings['log_level'] == 'débug'

    def test_function_handler(self):
        messages = []
        handler = helpers.FunctionHandler(messages.append)
        handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logger = logging.getLogger('taskpad.test_function_handler')
        logger.addHandler(handler)
        try:
            logger.warning('Camera unplugged')
        finally:
            logger.removeHandler(handler)
        assert messages == ['WARNING: Camera unplugged']


class TestDateUtil:

    def test_convert(self):
        result = DateUtil.convert(DateUtil.DUE_DATE, '2024-02-29')
        assert result == datetime(2024, 2, 29)

        result = DateUtil.convert(DateUtil.DUE_DATE, '2024-02-29', '%d/%m/%Y')
        assert result == '29/02/2024'

        result = DateUtil.convert('', datetime(2024, 1, 2, 3, 4, 5), DateUtil.IMAGE_TIMESTAMP)
        assert result == '20240102_030405'

        assert DateUtil.convert(DateUtil.DUE_DATE, 'next tuesday') is False
        assert DateUtil.convert(DateUtil.DUE_DATE, '2023-02-29') is False

    def test_is_overdue(self):
        today = datetime(2024, 3, 10, 15, 30)
        assert DateUtil.is_overdue('2024-03-09', today) is True
        assert DateUtil.is_overdue('2024-03-10', today) is False
        assert DateUtil.is_overdue('2024-03-11', today) is False
        assert DateUtil.is_overdue(None, today) is False
        assert DateUtil.is_overdue('', today) is False
        assert DateUtil.is_overdue('someday', today) is False
