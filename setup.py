from setuptools import setup

package_name = 'virtual_stick'

setup(
    name=package_name,
    version='0.1.0',
    package_dir={'': 'src'},
    packages=[package_name, f'{package_name}.widgets'],
    python_requires='>=3.8',
    install_requires=['setuptools'],
    extras_require={
        'qt': ['PyQt5', 'python_qt_binding'],
        'test': ['pytest'],
    },
    zip_safe=True,
    keywords=['joystick', 'virtual stick', 'touch', 'pointer', 'qt'],
    description='Drag-session engine that turns pointer and touch samples into a circle-clamped stick vector and direction.',
    license='BSD',
    entry_points={
        'console_scripts': [
            'virtual_stick = ' + package_name + '.main:main',
        ],
    },
)
