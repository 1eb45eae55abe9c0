import argparse


def int_gt(threshold: int):
    def inner(x: str) -> int:
        try:
            x_int = int(x)
        except ValueError as e:
            raise argparse.ArgumentTypeError(f'invalid integer {x!r}') from e

        if x_int <= threshold:
            raise argparse.ArgumentTypeError(
                f'argument should be greater than {threshold}'
            )

        return x_int

    return inner


int_pos = int_gt(0)
