import pytest

from pagefinder.config import Configuration


def _write(path, text):
    path.write_text(text, encoding="utf-8")
    return path


def test_get_reads_first_two_tokens(tmp_path):
    conf = _write(tmp_path / "my.conf", "PageLib /data/pages extra tokens\nDictDir /data/dict\n")
    config = Configuration(conf)
    assert config.get("PageLib") == "/data/pages"
    assert config.get("DictDir") == "/data/dict"


def test_first_occurrence_wins(tmp_path):
    conf = _write(tmp_path / "my.conf", "Key first\nKey second\n")
    assert Configuration(conf).get("Key") == "first"


def test_missing_key_returns_default(tmp_path):
    conf = _write(tmp_path / "my.conf", "Key value\n\n")
    config = Configuration(conf)
    assert config.get("Other") == ""
    assert config.get("Other", "fallback") == "fallback"
    assert "" not in config.values


def test_key_without_value(tmp_path):
    conf = _write(tmp_path / "my.conf", "Lonely\n")
    config = Configuration(conf)
    assert "Lonely" in config.values
    assert config.get("Lonely", "fallback") == ""


def test_stop_words_union_of_matching_keys(tmp_path):
    en = _write(tmp_path / "en.txt", "the a\nof\n")
    cn = _write(tmp_path / "cn.txt", "的 了\n")
    other = _write(tmp_path / "other.txt", "ignored\n")
    conf = _write(
        tmp_path / "my.conf",
        f"StopWordsEn {en}\nStopWordsCn {cn}\nWordsOther {other}\n",
    )
    assert Configuration(conf).stop_words() == {"the", "a", "of", "的", "了"}


def test_stop_words_missing_file_raises(tmp_path):
    conf = _write(tmp_path / "my.conf", f"StopWords {tmp_path / 'absent.txt'}\n")
    with pytest.raises(FileNotFoundError):
        Configuration(conf).stop_words()


def test_dict_dirs(tmp_path):
    conf = _write(tmp_path / "my.conf", "DictDir /data/dict\n")
    assert Configuration(conf).dict_dirs() == ["/data/dict"]
    empty = _write(tmp_path / "empty.conf", "PageLib x\n")
    assert Configuration(empty).dict_dirs() == []


def test_missing_config_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Configuration(tmp_path / "absent.conf")