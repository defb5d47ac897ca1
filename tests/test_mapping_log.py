"""
Tests for the mapping log — docs/react_to_rails.md entries.
"""

from railshadow.core.models.description import ComponentDescription, PropField
from railshadow.core.services.component_analyzer import analyze_component
from railshadow.core.services.mapping_log import append_mapping_entry, build_mapping_entry


class TestBuildMappingEntry:
    def test_shape(self, filter_chip_source):
        entry = build_mapping_entry(analyze_component(filter_chip_source))
        lines = entry.splitlines()
        assert lines[0] == "## FilterChip"
        assert lines[1] == "- **React component:** `FilterChip`"
        assert lines[2] == "  - Props: label, active, onToggle"
        assert lines[3] == "  - State: selected, count"
        assert lines[4] == "  - Hooks: useFilters"
        assert lines[5] == "  - Icons: X, Check"
        assert "`app/components/filter_chip/filter_chip_component.rb`" in lines[6]
        assert "`app/components/filter_chip/filter_chip_component.html.erb`" in lines[7]
        assert "`app/assets/stylesheets/components/_filter-chip.css`" in lines[8]
        assert "`app/javascript/controllers/filter-chip_controller.js`" in lines[9]
        assert entry.endswith("\n")

    def test_empty_lists_are_na(self):
        entry = build_mapping_entry(ComponentDescription(name="Plain"))
        assert "  - Props: n/a" in entry
        assert "  - State: n/a" in entry
        assert "  - Hooks: n/a" in entry
        assert "  - Icons: n/a" in entry


class TestAppendMappingEntry:
    def test_creates_and_appends(self, config):
        first = ComponentDescription(name="Alpha")
        second = ComponentDescription(name="Beta", props=[PropField(name="x")])

        path = append_mapping_entry(config, first)
        append_mapping_entry(config, second)

        assert path == config.mapping_log
        text = path.read_text()
        assert text.index("## Alpha") < text.index("## Beta")
        assert "  - Props: x" in text
        # Entries are separated by a blank line
        assert "[Document which RubyUI components to use]\n\n## Beta" in text
