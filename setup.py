from setuptools import setup, find_packages

setup(
    name='PortDash',
    version='2025.10.1',
    description='Launcher dashboard for self-hosted network services',
    author='PortDash Development Team',
    packages=find_packages(exclude=['tests', 'tests.*']),
    include_package_data=True,
    install_requires=[
        'reflex>=0.7.2',
        'sqlmodel>=0.0.21',
        'SQLAlchemy>=2.0',
        'python-dotenv>=1.0.0',
    ],
    extras_require={
        'test': [
            'pytest>=8.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'portdash=portdash.__main__:main',
        ],
    },
    python_requires='>=3.10',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: End Users/Desktop',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: System :: Networking',
    ],
    keywords='dashboard homelab bookmarks self-hosted',
)
