#!/usr/bin/env python3
"""
Plot a recorded session: joint angles per sample and the end-effector
points in the plane of the arm.
"""

import argparse
import os
from pathlib import Path

import matplotlib
import numpy as np

# Detect headless / WSL environments: if DISPLAY is not set, use non-interactive backend
HEADLESS_PLOT = False
if os.environ.get('DISPLAY', '') == '' or os.environ.get('WSL_DISTRO_NAME'):
    matplotlib.use('Agg')
    HEADLESS_PLOT = True

import matplotlib.pyplot as plt

from my_2d_robot.errors import My2dRobotError
from my_2d_robot.kinematics import PlanarArm
from my_2d_robot.records import load_records


def plot_records(records, arm=None, title='2-DOF Planar Robot Arm - Recorded Samples'):
    """Build the analysis figure for a list of OutputRecord

    When a PlanarArm is given, the links of the last recorded pose are drawn
    over the end-effector positions.
    """
    angles = np.array([[r.angle1, r.angle2] for r in records]).reshape(-1, 2)
    points = np.array([[r.position.x, r.position.y] for r in records]).reshape(-1, 2)
    samples = np.arange(1, len(records) + 1)

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))
    fig.suptitle(title, fontsize=14)

    # Joint angles
    axes[0].set_title('Joint Angles')
    axes[0].set_xlabel('Sample')
    axes[0].set_ylabel('Angle (rad)')
    axes[0].grid(True, linestyle='--', alpha=0.7)
    axes[0].plot(samples, angles[:, 0], 'b.-', label='joint1')
    axes[0].plot(samples, angles[:, 1], 'r.-', label='joint2')
    axes[0].legend()

    # End-effector positions
    axes[1].set_title('End-effector Positions')
    axes[1].set_xlabel('X')
    axes[1].set_ylabel('Y')
    axes[1].grid(True, linestyle='--', alpha=0.7)
    axes[1].set_aspect('equal')
    axes[1].plot(0, 0, 'ko', markersize=10, label='Base')
    axes[1].plot(points[:, 0], points[:, 1], 'b-', alpha=0.3)
    axes[1].scatter(points[:, 0], points[:, 1], c=samples, cmap='viridis', s=20, label='End Effector')
    if len(points):
        axes[1].plot(points[-1, 0], points[-1, 1], 'go', markersize=10, label='Last')
    if arm is not None and len(records):
        base, elbow, tip = arm.joint_positions([records[-1].angle1, records[-1].angle2])
        axes[1].plot([base[0], elbow[0]], [base[1], elbow[1]], 'b-', linewidth=3, label=f'Link 1 (L₁={arm.l1})')
        axes[1].plot([elbow[0], tip[0]], [elbow[1], tip[1]], 'r-', linewidth=3, label=f'Link 2 (L₂={arm.l2})')
        axes[1].plot(elbow[0], elbow[1], 'ko', markersize=8, label='Joint 2')
    axes[1].legend(loc='upper left')

    plt.tight_layout()
    return fig


def main(argv=None):
    parser = argparse.ArgumentParser(description='Plot a recorded joint/end-effector YAML file')
    parser.add_argument('input', help='output YAML written by joint_states_subscriber')
    parser.add_argument('-o', '--output', help='PNG file to write (default: next to the input)')
    parser.add_argument('--link-lengths', nargs=2, type=float, metavar=('L1', 'L2'),
                        help='draw the last recorded pose with these link lengths')
    parser.add_argument('--offsets', nargs=2, type=float, default=[0.0, 0.0], metavar=('T1', 'T2'),
                        help='joint offsets in degrees used with --link-lengths')
    parser.add_argument('--show', action='store_true', help='open an interactive window')
    args = parser.parse_args(argv)

    try:
        records = load_records(args.input)
    except (OSError, My2dRobotError) as e:
        print(f"Error: {e}")
        return 1

    if not records:
        print("No data to plot")
        return 1

    output_file = args.output or str(Path(args.input).with_suffix('.png'))
    arm = None
    if args.link_lengths:
        arm = PlanarArm(lengths=args.link_lengths, offsets_deg=args.offsets)

    fig = plot_records(records, arm=arm)
    fig.savefig(output_file, dpi=150, bbox_inches='tight')
    print(f"✓ Plot of {len(records)} samples saved to: {output_file}")

    if args.show and not HEADLESS_PLOT:
        plt.show()
    plt.close(fig)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
