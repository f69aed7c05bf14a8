import nox


@nox.session()
def lint(session):
    session.run('flake8', 'wslconv', 'test', external=True)


@nox.session()
def typing(session):
    session.run('mypy', external=True)


@nox.session()
def tests(session):
    session.run('coverage', 'run', '-m', 'pytest', external=True)
    session.run('coverage', 'report', '--show-missing', external=True)


@nox.session()
def smoke(session):
    """ Run both directions through the installed console script. """

    session.run('wslconv', 'linux', 'C:\\Windows\\System32', external=True)
    session.run('wslconv', 'windows', '/mnt/c/Windows', external=True)
