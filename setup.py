import os

from setuptools import find_packages, setup


here = os.path.abspath(os.path.dirname(__file__))

about = {}
with open(os.path.join(here, "mediatypes", "__version__.py")) as f:
    exec(f.read(), about)


def read(filename):
    with open(os.path.join(here, filename), 'rb') as f:
        return f.read().decode('utf-8')


setup(
    name='mediatypes',
    version=about['__version__'],
    description=('Parse, compare and match HTTP media type header values'
                 ' (Content-Type, Accept).'),
    long_description=read('README.md'),
    long_description_content_type='text/markdown',
    entry_points='''
        [console_scripts]
        mediatypes-check=mediatypes.checker.command_line:main
    ''',
    install_requires=[
        'requests',
        'colorama',
    ],
    extras_require={
        'test': ['pytest'],
    },
    packages=find_packages(),
    license='MIT',
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: Software Development :: Libraries',
    ]
)
