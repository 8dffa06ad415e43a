import logging as lg
from pathlib import Path

import click

from intcode.common.vmconf import PROGRAM_FILE, LAYER_WIDTH, LAYER_HEIGHT
from intcode.loader.program import load_digits_file
from intcode.image.layers import split_layers, checksum, flatten, render


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('-w', '--width', type=int, default=LAYER_WIDTH)
@click.option('-h', '--height', type=int, default=LAYER_HEIGHT)
@click.argument('image_filename', type=Path, default=PROGRAM_FILE)
def image(verbose: bool, width: int, height: int, image_filename: Path):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)
    lg.info('INTCODE IMAGE')

    layers = split_layers(load_digits_file(image_filename), width, height)
    lg.debug(f'{len(layers)} layers of {width}x{height}')

    click.echo(checksum(layers))
    click.echo(render(flatten(layers)))


if __name__ == '__main__':
    image()
