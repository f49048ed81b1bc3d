"""
Command line smoke tests.
"""
import pytest

import mvs


def test_generates_paragraphs(tmp_path, capsys):
    path = tmp_path / 'in.txt'
    path.write_text('the cat sat. the dog sat.\n', encoding='utf-8')

    assert mvs.main([str(path), '-n', '3', '--seed', '7']) == 0

    out = capsys.readouterr().out
    assert out == 'the cat sat. the dog sat.\n\n' * 3


def test_default_paragraph_count(capsys):
    assert mvs.main([]) == 0
    assert capsys.readouterr().out == '\n\n' * 5


def test_max_words(tmp_path, capsys):
    path = tmp_path / 'in.txt'
    path.write_text('a a a a a a', encoding='utf-8')

    assert mvs.main([str(path), '-n', '1', '--max-words', '4']) == 0
    assert capsys.readouterr().out == 'a a a a\n\n'


def test_seed_is_reproducible(tmp_path, capsys):
    path = tmp_path / 'in.txt'
    path.write_text('a b c\n\na c b\n\nb a c\n\nc c a b', encoding='utf-8')

    mvs.main([str(path), '--seed', '42'])
    first = capsys.readouterr().out
    mvs.main([str(path), '--seed', '42'])
    assert capsys.readouterr().out == first


def test_unreadable_source(tmp_path, capsys):
    assert mvs.main([str(tmp_path / 'missing.txt')]) == 1
    captured = capsys.readouterr()
    assert captured.out == ''
    assert 'missing.txt' in captured.err


def test_negative_max_words(tmp_path, capsys):
    path = tmp_path / 'in.txt'
    path.write_text('a b c', encoding='utf-8')

    with pytest.raises(SystemExit) as exc:
        mvs.main([str(path), '--max-words', '-1'])
    assert exc.value.code == 2
    assert 'must not be negative' in capsys.readouterr().err
