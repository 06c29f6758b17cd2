""" Walk through the common client operations against a running engine. The
    location of the engine's C API library is taken from ZEONDB_LIBRARY.
"""

import zeondb

from zeondb import Account, KeyPath


def main():

    with zeondb.connect() as session:
        if not session.login('admin', 'admin'):
            raise RuntimeError(session.last_error())

        company = dict()
        company['name'] = ''
        company['employees'] = list()
        company['projects'] = list()

        session.new_template('company', company).unwrap()
        session.set(KeyPath('companies'), dict()).unwrap()

        companies = KeyPath('companies')

        for org in ('Oven', 'Deno'):
            session.use_template('company', companies.with_branch(org)).unwrap()

        for org in session.branches(companies).unwrap():
            value = session.get(companies.with_branch(org)).unwrap()
            print('%s => %s' % (org, zeondb.json.dumps(value).decode()))

        # Links and nested keys.

        session.set(KeyPath('hello').chain(KeyPath('world')), 'hey').unwrap()
        session.link(KeyPath('hello').chain(KeyPath('svet')), KeyPath('$').chain(KeyPath('world')))
        print(session.get(KeyPath('hello')).unwrap())

        # Account administration.

        theo = Account('theo')
        print(session.auth(theo.create('paris')).unwrap())
        print(session.auth(theo.get_perms(companies)).unwrap())
        session.auth(theo.promote()).unwrap()


if __name__ == '__main__':
    main()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
