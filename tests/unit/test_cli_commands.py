import json

import pytest
import yaml
from click.testing import CliRunner

from src.presentation import cli as cli_module


@pytest.fixture(autouse=True)
def no_env_user(monkeypatch):
    monkeypatch.delenv('POSTBOARD_USER', raising=False)
    monkeypatch.delenv('POSTBOARD_CONFIG', raising=False)


@pytest.fixture
def invoke(tmp_path):
    runner = CliRunner()
    base = ['--config', str(tmp_path / 'postboard.yaml'), '--db', str(tmp_path / 'postboard.db')]

    def _invoke(*args, **kwargs):
        return runner.invoke(cli_module.cli, base + list(args), **kwargs)

    return _invoke


def create(invoke, title, tags, user='alice.near'):
    result = invoke('--user', user, 'create', '--title', title, '--description', f'{title} description',
                    '--tags', tags, '--media', 'post.png', '--format', 'json')
    assert result.exit_code == 0, result.output
    return json.loads(result.output)[0]


def test_create_outputs_post(invoke):
    post = create(invoke, 'Test', 'tag1,tag2,tag3')

    assert post['id'] == 0
    assert post['tags'] == ['tag1', 'tag2', 'tag3']
    assert post['owner_id'] == 'alice.near'


def test_create_table_output(invoke):
    result = invoke('--user', 'alice.near', 'create', '--title', 'Hello', '--tags', 'a')

    assert result.exit_code == 0
    assert 'Created post 0' in result.output


def test_create_without_user_fails(invoke):
    result = invoke('create', '--title', 'Hello', '--tags', 'a')

    assert result.exit_code == 1
    assert 'No caller identity' in result.output


def test_user_from_environment(invoke, monkeypatch):
    monkeypatch.setenv('POSTBOARD_USER', 'env.near')

    result = invoke('create', '--title', 'Hello', '--tags', 'a', '--format', 'json')

    assert json.loads(result.output)[0]['owner_id'] == 'env.near'


def test_user_from_config(invoke, tmp_path):
    (tmp_path / 'postboard.yaml').write_text(yaml.safe_dump({'default_user': 'cfg.near'}), encoding='utf-8')

    result = invoke('create', '--title', 'Hello', '--tags', 'a', '--format', 'json')

    assert json.loads(result.output)[0]['owner_id'] == 'cfg.near'


def test_state_shared_between_invocations(invoke):
    create(invoke, 'Test', 'tag1')
    create(invoke, 'Test2', 'tag2')

    result = invoke('list', '--format', 'json')

    entries = json.loads(result.output)
    assert [entry[0] for entry in entries] == [0, 1]
    assert entries[1][1]['title'] == 'Test2'


def test_list_empty(invoke):
    result = invoke('list')

    assert result.exit_code == 0
    assert 'No posts yet' in result.output


def test_show_post(invoke):
    create(invoke, 'Test', 'tag1')

    result = invoke('show', '0', '--format', 'json')

    assert result.exit_code == 0
    assert json.loads(result.output)[0]['title'] == 'Test'


def test_show_unknown_post(invoke):
    result = invoke('show', '5')

    assert result.exit_code == 1
    assert 'No post found' in result.output


def test_show_invalid_id(invoke):
    result = invoke('show', 'abc')

    assert result.exit_code == 1
    assert 'non-negative integer' in result.output


def test_like_and_liked(invoke):
    create(invoke, 'Test', 'tag1')
    create(invoke, 'Test2', 'tag2')

    assert invoke('--user', 'bob.near', 'like', '0').exit_code == 0
    result = invoke('--user', 'bob.near', 'like', '1', '--format', 'json')
    assert json.loads(result.output)[0]['liking_users'] == ['bob.near']

    liked = invoke('--user', 'bob.near', 'liked', '--format', 'json')
    assert [p['title'] for p in json.loads(liked.output)] == ['Test', 'Test2']


def test_like_unknown_post_fails(invoke):
    result = invoke('--user', 'bob.near', 'like', '7')

    assert result.exit_code == 1
    assert 'No post found' in result.output


def test_liked_without_likes_fails(invoke):
    result = invoke('--user', 'bob.near', 'liked')

    assert result.exit_code == 1
    assert 'No liked posts' in result.output


def test_by_tag(invoke):
    create(invoke, 'Test', 'tag1,tag2,tag3')
    create(invoke, 'Test2', 'tag4,tag5,tag6')
    create(invoke, 'Test3', 'tag1,tag5,tag7')

    result = invoke('by-tag', 'tag5', '--format', 'json')

    assert [p['title'] for p in json.loads(result.output)] == ['Test2', 'Test3']


def test_by_tag_table_output(invoke):
    create(invoke, 'Test', 'news')

    result = invoke('by-tag', 'news')

    assert result.exit_code == 0
    assert 'Test' in result.output


def test_by_unknown_tag_fails(invoke):
    result = invoke('by-tag', 'nothing')

    assert result.exit_code == 1
    assert 'No posts found' in result.output


def test_export(invoke, tmp_path):
    create(invoke, 'Test', 'tag1')
    out = tmp_path / 'state.json'

    result = invoke('export', '--output', str(out))

    assert result.exit_code == 0
    assert json.loads(out.read_text(encoding='utf-8'))['post_counter'] == 1


def test_memory_backend_starts_empty(invoke):
    create(invoke, 'Test', 'tag1')

    result = invoke('--backend', 'memory', 'list', '--format', 'json')

    assert json.loads(result.output) == []


def test_config_set_and_show(invoke, tmp_path):
    result = invoke('config', 'set', 'default_user', 'carol.near')
    assert result.exit_code == 0

    saved = yaml.safe_load((tmp_path / 'postboard.yaml').read_text(encoding='utf-8'))
    assert saved == {'default_user': 'carol.near'}

    shown = invoke('config', 'show')
    assert 'carol.near' in shown.output


def test_config_set_rejects_bad_backend(invoke):
    result = invoke('config', 'set', 'backend', 'redis')

    assert result.exit_code == 1
    assert 'Unknown backend' in result.output


def test_invalid_config_file_reported(invoke, tmp_path):
    (tmp_path / 'postboard.yaml').write_text('backend: [oops', encoding='utf-8')

    result = invoke('list')

    assert result.exit_code == 1
    assert 'Invalid YAML' in result.output


def test_config_set_bad_log_level_does_not_lock_out(invoke, tmp_path):
    result = invoke('config', 'set', 'log_level', 'LOUD')

    assert result.exit_code == 1
    assert 'Unknown log level' in result.output
    assert not (tmp_path / 'postboard.yaml').exists()
    assert invoke('config', 'set', 'log_level', 'INFO').exit_code == 0


def test_like_id_beyond_storage_range(invoke):
    result = invoke('--user', 'bob.near', 'like', str(2 ** 70))

    assert result.exit_code == 1
    assert 'No post found' in result.output
