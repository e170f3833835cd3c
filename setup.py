import setuptools
import os

own_dir = os.path.abspath(os.path.dirname(__file__))


def requirements():
    with open(os.path.join(own_dir, 'requirements.txt')) as f:
        for line in f.readlines():
            line = line.strip()
            if not line or line.startswith('#'):
                continue
            yield line


def modules():
    return [
        'http_requests',
    ]


def version():
    with open(os.path.join(own_dir, 'VERSION')) as f:
        return f.read().strip()


setuptools.setup(
    name='gh-changelog',
    version=version(),
    description='Download all GitHub releases of a repository into a single changelog',
    python_requires='>=3.10',
    py_modules=modules(),
    packages=['changelog', 'ci', 'github'],
    package_data={
        '': ['VERSION'],
    },
    install_requires=list(requirements()),
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'gh-changelog = changelog.cli:main',
        ],
    },
)
