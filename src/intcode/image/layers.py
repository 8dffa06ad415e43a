from typing import Sequence

WHITE = 1
TRANSPARENT = 2


class LayerSizeError(Exception):
    pass


class Layer():
    width: int
    height: int
    pixels: list[int]

    def __init__(self, pixels: Sequence[int], width: int, height: int):
        if len(pixels) != width * height:
            raise LayerSizeError(f'{len(pixels)} pixels do not fill {width}x{height}')

        self.width = width
        self.height = height
        self.pixels = list(pixels)

    def index(self, x: int, y: int) -> int:
        return y * self.width + x

    def pixel(self, x: int, y: int) -> int:
        return self.pixels[self.index(x, y)]

    def set_pixel(self, x: int, y: int, value: int):
        self.pixels[self.index(x, y)] = value

    def digit_count(self, digit: int) -> int:
        return self.pixels.count(digit)

    def rows(self) -> list[list[int]]:
        return [self.pixels[y * self.width:(y + 1) * self.width] for y in range(self.height)]


def split_layers(digits: Sequence[int], width: int, height: int) -> list[Layer]:
    size = width * height

    if size <= 0 or not digits or len(digits) % size != 0:
        raise LayerSizeError(f'{len(digits)} digits do not split into {width}x{height} layers')

    return [Layer(digits[i:i + size], width, height) for i in range(0, len(digits), size)]


def checksum(layers: Sequence[Layer]) -> int:
    # Layer with the fewest zeros
    layer = min(layers, key=lambda lr: lr.digit_count(0))
    return layer.digit_count(1) * layer.digit_count(2)


def flatten(layers: Sequence[Layer]) -> Layer:
    front = layers[0]
    pixels = []

    for i in range(len(front.pixels)):
        visible = next((lr.pixels[i] for lr in layers if lr.pixels[i] != TRANSPARENT), TRANSPARENT)
        pixels.append(visible)

    return Layer(pixels, front.width, front.height)


def render(layer: Layer) -> str:
    return '\n'.join(
        ''.join('#' if p == WHITE else ' ' for p in row)
        for row in layer.rows()
    )
