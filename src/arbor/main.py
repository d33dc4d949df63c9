"""
Demo entry point
Renders a small page twice to show per-pass restructuring.
"""

import argparse

from .core import configure_logging, create_container, get_logger, get_settings
from .application import Application
from .behaviors import AttributeModifier
from .components import Label, MarkupContainer, Page
from .markup import DictMarkupSource, MarkupElement

logger = get_logger(__name__)


DEMO_MARKUP = {
    "": MarkupElement.of("body"),
    "border": MarkupElement.of("div", {"class": "border"}),
    "border:title": MarkupElement.of("h1", body="placeholder"),
    "border:status": MarkupElement.of("span", {"class": "status"}, open_close=True),
}


class DemoPage(Page):
    """Alternates which status label is attached on every render."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.renders = 0
        self.border = MarkupContainer("border")
        self.online = Label("status", "online")
        self.offline = Label("status", "offline")
        self.online.add_behavior(AttributeModifier.append("class", "ok"))
        self.border.add(Label("title", "Arbor demo"), self.online)
        self.add(self.border)

    def on_before_render(self) -> None:
        self.renders += 1
        status = self.online if self.renders % 2 else self.offline
        self.border.add_or_replace(status)
        super().on_before_render()


def main() -> None:
    parser = argparse.ArgumentParser(description="Render the demo page")
    parser.add_argument("--passes", type=int, default=2, help="Number of render passes")
    args = parser.parse_args()

    settings = get_settings()
    configure_logging(settings.log_level, settings.json_logs)

    container = create_container(settings, DictMarkupSource(DEMO_MARKUP))
    application = container.get(Application)
    application.start()
    try:
        page = application.new_page(DemoPage)
        for _ in range(args.passes):
            print(application.render(page))
    finally:
        application.stop()
    logger.info("demo_complete", passes=args.passes)


if __name__ == "__main__":
    main()
