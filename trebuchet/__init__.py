"""trebuchet — calibration document checksums.

Each line of the document hides a calibration value: its first and last
digit read as a two-digit number. Part 1 only counts the characters 0-9;
part 2 also counts the words one through nine.

Usage:
    python -m trebuchet                        # Both parts over input/day1.txt
    python -m trebuchet total --rule literal   # Part 1 only
    python -m trebuchet explain                # Per-line breakdown
"""
