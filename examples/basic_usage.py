"""Basic usage example: build a dashboard and drag widgets around."""

from orderomatic.services import DashboardService, WidgetService
from orderomatic.storage import Database


def print_tree(service: WidgetService, dashboard_id: str) -> None:
    tree = service.get_widget_tree(dashboard_id)
    for drag_index in range(tree.length):
        node = tree.at(drag_index)
        indent = "    " if node.section_id else ""
        name = node.widget.name if node.kind == "widget" else "(end of section)"
        print(f"{drag_index:>2} {indent}{node.label:<5} {name}")
    print()


def main():
    """Demonstrate section-aware moves."""
    db = Database("sqlite:///./orderomatic-example.db")
    db.create_tables()

    with db.session() as session:
        dashboard = DashboardService(session).create_dashboard(name="Operations")
        widgets = WidgetService(session)

        widgets.create_widget(dashboard.id, "Welcome", "Text")
        section = widgets.create_widget(dashboard.id, "Traffic", "Section")
        widgets.create_widget(dashboard.id, "Requests per minute", "Chart", section_id=section.id)
        widgets.create_widget(dashboard.id, "Error rate", "Chart", section_id=section.id)
        widgets.create_widget(dashboard.id, "Notes", "Text")
        print_tree(widgets, dashboard.id)

        # Drop "Welcome" on the first chart: it joins the Traffic section
        widgets.move_widget(dashboard.id, 0, 2)
        print_tree(widgets, dashboard.id)

        # Drag the section below "Notes": its charts travel with it
        widgets.move_widget(dashboard.id, 0, 5)
        print_tree(widgets, dashboard.id)


if __name__ == "__main__":
    main()
