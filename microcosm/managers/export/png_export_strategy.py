from PIL import Image, ImageDraw
from microcosm.models import palette
from .image_export_strategy import ImageExportStrategy
import io

class PngExportStrategy(ImageExportStrategy):
    def __init__(self, scale=5):
        self.scale = scale

    def generate_export(self, colony):
        """Render the committed grid to a PNG snapshot."""
        image = self._create_grid_image(colony.get_field())
        buffer = io.BytesIO()
        image.save(buffer, format='PNG')
        return [(f"colony_gen{colony.get_generation()}.png", buffer.getvalue())]

    def _create_grid_image(self, field):
        """One scale x scale block per slot; dead and empty slots use the empty colour."""
        width = field.get_width() * self.scale
        height = field.get_depth() * self.scale

        img = Image.new("RGB", (width, height), palette.EMPTY)
        draw = ImageDraw.Draw(img)

        for row in range(field.get_depth()):
            for col in range(field.get_width()):
                cell = field.get_object_at(row, col)
                if cell is None or not cell.is_alive():
                    continue
                x = col * self.scale
                y = row * self.scale
                draw.rectangle((x, y, x + self.scale - 1, y + self.scale - 1), fill=tuple(cell.get_color()))

        return img
