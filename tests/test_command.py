import pytest
import zeondb

from zeondb import Account, KeyPath, Permission, command
from zeondb.errors import IdentityError, ValidationError


def test_set():

    line = command.set(KeyPath('hello').chain(KeyPath('world')), 'hey')
    assert line == 'set hello.world "hey"'

    line = command.set(KeyPath('doc'), {'a': 1})
    verb, key, value = line.split(' ', 2)

    assert verb == 'set'
    assert key == 'doc'
    assert zeondb.json.loads(value) == {'a': 1}


def test_set_structured():

    blog = dict()
    blog['title'] = 'blog'
    blog['author'] = 'someone'
    blog['tags'] = ['one', 'two']
    blog['body'] = 'first line\nsecond line'

    line = command.set(KeyPath('users').with_branch('theo'), [blog, blog])

    assert '\n' not in line
    assert line.startswith('set users@theo [{"title":"blog","author":"someone",')

    value = line.split(' ', 2)[2]
    assert zeondb.json.loads(value) == [blog, blog]


def test_unencodable():

    with pytest.raises(ValidationError):
        command.set(KeyPath('x'), object())


def test_key_commands():

    key = KeyPath('users')
    target = KeyPath('$').chain(KeyPath('world'))

    assert command.get(key) == 'get users'
    assert command.delete(key) == 'delete users'
    assert command.link(KeyPath('hello').chain(KeyPath('svet')), target) == 'link hello.svet $.world'


def test_branches():

    key = KeyPath('users')

    assert command.merge(key, 'default', 'theo') == 'branches merge users default theo'
    assert command.branches(key) == 'branches get users'


def test_templates():

    company = dict()
    company['name'] = ''
    company['employees'] = []
    company['projects'] = []

    assert command.template_get('company') == 'template get company'
    assert command.template_set('company', KeyPath('companies').with_branch('Oven')) == 'template set company companies@Oven'
    assert command.template_create('company', company) == 'template create company {"name":"","employees":[],"projects":[]}'


def test_options():

    assert command.options_set('format', 'JSON') == 'options set format "JSON"'
    assert command.options_set('limit', 10) == 'options set limit 10'
    assert command.options_get('format') == 'options get format'
    assert command.options_print() == 'options print'

    with pytest.raises(ValidationError) as excinfo:
        command.options_set('format', 'XML')

    assert str(excinfo.value) == 'Format must be JSON'

    # Only the exact literal is accepted.

    with pytest.raises(ValidationError):
        command.options_set('format', 'json')


def test_arrays():

    key = KeyPath('list')

    assert command.array_push(key, {'a': 1}) == 'array push list {"a":1}'
    assert command.array_insert(key, 3, 'x') == 'array insert list 3 "x"'
    assert command.array_erase(key, 0) == 'array erase list 0'
    assert command.array_length(key) == 'array length list'

    with pytest.raises(ValidationError):
        command.array_insert(key, -1, 'x')

    with pytest.raises(ValidationError):
        command.array_erase(key, -1)

    with pytest.raises(ValidationError):
        command.array_erase(key, '2')

    with pytest.raises(ValidationError):
        command.array_erase(key, True)


def test_line_guard():

    with pytest.raises(ValidationError):
        command.get(KeyPath('users\nset users 1'))

    with pytest.raises(ValidationError):
        command.get(KeyPath('users').with_branch('a\0b'))

    with pytest.raises(ValidationError):
        command.template_get('company\r')

    with pytest.raises(ValidationError):
        command.auth(Account('theo').create('pa\nss'))


def test_auth_create():

    theo = Account('theo')

    line = command.auth(theo.create('paris'))
    assert line == 'auth create theo paris {can_write: true, can_read: true }'

    line = command.auth(theo.create('paris', Permission(read=True, write=False)))
    assert line == 'auth create theo paris {can_write: false, can_read: true }'


def test_auth_self():

    admin = Account('admin')
    key = KeyPath('users')
    perms = Permission(True, False)

    assert command.auth(admin.get_perms(key), 'admin') == 'auth get users'
    assert command.auth(admin.set_perms(key, perms), 'admin') == 'auth set users {can_write: false, can_read: true }'


def test_auth_other():

    theo = Account('theo')
    key = KeyPath('users').with_branch('theo')
    perms = Permission(True, True)

    assert command.auth(theo.get_perms(key), 'admin') == 'auth get users@theo of theo'
    assert command.auth(theo.set_perms(key, perms), 'admin') == 'auth set users@theo {can_write: true, can_read: true } to theo'


def test_auth_explicit():

    # These always name the user, even when it is the active identity.

    admin = Account('admin')

    assert command.auth(admin.promote(), 'admin') == 'auth promote admin'
    assert command.auth(admin.demote(), 'admin') == 'auth demote admin'
    assert command.auth(admin.delete(), 'admin') == 'auth delete admin'
    assert command.auth(admin.create('secret'), 'admin').startswith('auth create admin secret ')


def test_auth_without_identity():

    theo = Account('theo')
    key = KeyPath('users')

    with pytest.raises(IdentityError):
        command.auth(theo.get_perms(key))

    with pytest.raises(IdentityError):
        command.auth(theo.set_perms(key, Permission(True, True)), None)

    # Requests that always name the user do not need an identity.

    assert command.auth(theo.promote()) == 'auth promote theo'


def test_auth_invalid():

    with pytest.raises(TypeError):
        command.auth('auth promote theo')


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
