import random
import unittest

from zipette.lang.color import TERMCOLORS, Color, ColorRenderer


class ColorTestCase(unittest.TestCase):

    def test_from_name(self):
        cases = {"red": Color.RED, "pink": Color.PINK, "multicolor": Color.MULTICOLOR}
        for case, result in cases.items():
            self.assertIs(result, Color.from_name(case), case)

        for case in ["RED", "mauve", "", "5"]:
            self.assertIsNone(Color.from_name(case), case)

    def test_every_color_renders(self):
        for color in Color:
            if color is not Color.MULTICOLOR:
                self.assertIn(color, TERMCOLORS)


class ColorRendererTestCase(unittest.TestCase):

    def test_render(self):
        renderer = ColorRenderer(force_color=True)
        self.assertEqual("\x1b[31m12\x1b[0m", renderer.render("12", Color.RED))
        self.assertEqual("\x1b[35m12\x1b[0m", renderer.render("12", Color.PURPLE))

    def test_no_color(self):
        renderer = ColorRenderer(force_color=False)
        for color in Color:
            self.assertEqual("-3.5", renderer.render("-3.5", color), color)

    def test_multicolor(self):
        text = "123456.789"
        rendered = ColorRenderer(seed=3, force_color=True).render(text, Color.MULTICOLOR)
        self.assertEqual(len(text), rendered.count("\x1b[0m"))

    def test_multicolor_seed(self):
        text = "3.141592653589793"
        first = ColorRenderer(seed=42, force_color=True).render(text, Color.MULTICOLOR)

        random.seed(0)  # the module-level generator is not used
        second = ColorRenderer(seed=42, force_color=True).render(text, Color.MULTICOLOR)
        self.assertEqual(first, second)


if __name__ == '__main__':
    unittest.main()
