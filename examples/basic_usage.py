#!/usr/bin/env python3
"""
Basic usage examples for the camera coverage library
"""

from camera_coverage import Camera, Range, covers_requirement, create_checker


def example_single_check():
    """Example: Check one software camera against two hardware cameras"""
    print("Example: single coverage check")
    print("=" * 50)
    
    hardware = [
        Camera(distance=Range(1, 2), light_level=Range(1, 2), name="near"),
        Camera(distance=Range(4, 5), light_level=Range(4, 5), name="far"),
    ]
    
    covered = covers_requirement((1, 3), (2, 5), hardware)
    print(f"Covered (envelope): {covered}")


def example_reports():
    """Example: Compare envelope and union reports for a gap"""
    print("\nExample: envelope vs union")
    print("=" * 50)
    
    hardware = [
        {"name": "near", "distance": [1, 2], "light_level": [1, 2]},
        {"name": "far", "distance": [4, 5], "light_level": [4, 5]},
    ]
    
    for mode in ("envelope", "union"):
        report = create_checker(mode).evaluate((1, 3), (2, 5), hardware)
        print(f"{mode}: covered={report.covered}")
        for dimension in (report.distance, report.light_level):
            gaps = [gap.to_tuple() for gap in dimension.gaps]
            print(f"   {dimension.dimension}: envelope={dimension.envelope.to_tuple()} gaps={gaps}")


if __name__ == "__main__":
    example_single_check()
    example_reports()
