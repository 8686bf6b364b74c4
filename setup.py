from setuptools import setup
import os

package_name = 'my_2d_robot'

data_files = [
    ('share/ament_index/resource_index/packages', [os.path.join('resource', package_name)]),
    ('share/' + package_name, ['package.xml']),
]

# include launch file from launch/ directory
if os.path.exists(os.path.join('launch', 'launch_recorder.py')):
    data_files.append((os.path.join('share', package_name, 'launch'), [os.path.join('launch', 'launch_recorder.py')]))

setup(
    name=package_name,
    version='0.1.0',
    packages=[package_name],
    install_requires=['setuptools', 'numpy', 'matplotlib', 'pyyaml'],
    extras_require={
        'test': ['pytest'],
    },
    tests_require=['pytest'],
    data_files=data_files,
    entry_points={
        'console_scripts': [
            'joint_states_subscriber = my_2d_robot.joint_states_subscriber:main',
            'my_2d_robo_state_publisher = my_2d_robot.state_publisher:main',
            'plot_recording = my_2d_robot.plot_recording:main',
        ],
    },
)
