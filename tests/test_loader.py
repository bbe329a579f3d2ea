"""
Unit tests for the network file loader.
"""

import logging

import pytest

from social_graph.data import (
    NetworkData,
    NetworkFileError,
    load_network,
    parse_network,
    read_network,
)
from social_graph.graph import ConnectionStatus, find_connection, friends_of


class TestParseNetwork:
    """Test parsing network text."""

    def test_parse_chain(self, chain_network):
        """Header and edges are parsed in order."""
        assert chain_network.node_count == 4
        assert chain_network.edges == ((0, 1), (1, 2), (2, 3))
        assert chain_network.edge_count == 3
        assert chain_network.source is None

    def test_extra_whitespace(self):
        """Tabs, repeated spaces and surrounding whitespace are accepted."""
        network = parse_network(["  3\t2 \n", "0   1\n", "\t1 2  \n"])
        assert network.node_count == 3
        assert network.edges == ((0, 1), (1, 2))

    def test_blank_lines_skipped(self):
        """Blank lines do not count as friendships."""
        network = parse_network(["\n", "2 1\n", "\n", "0 1\n", "\n"])
        assert network.edges == ((0, 1),)

    def test_lines_after_declared_edges_ignored(self):
        """Only the declared number of friendships is read."""
        network = parse_network(["3 1", "0 1", "1 2"])
        assert network.edges == ((0, 1),)

    def test_zero_edges(self):
        """A header with no friendships gives an edgeless network."""
        network = parse_network(["5 0"])
        assert network.node_count == 5
        assert network.edges == ()

    def test_empty_input_raises(self):
        """Missing header is an error."""
        with pytest.raises(NetworkFileError, match="missing header"):
            parse_network([])

    def test_short_input_raises(self):
        """Fewer friendship lines than declared is an error."""
        with pytest.raises(NetworkFileError, match="expected 3 friendships, found 1"):
            parse_network(["4 3", "0 1"])

    def test_non_integer_raises_with_line_number(self):
        """Non-numeric tokens are reported with their line number."""
        with pytest.raises(NetworkFileError) as exc_info:
            parse_network(["2 1", "0 x"], source="net.txt")
        assert exc_info.value.line_number == 2
        assert "net.txt:2" in str(exc_info.value)

    def test_single_token_line_raises(self):
        """A friendship line needs two ids."""
        with pytest.raises(NetworkFileError, match="expected two integers"):
            parse_network(["2 1", "0"])

    def test_negative_values_raise(self):
        """Negative ids and counts are rejected."""
        with pytest.raises(NetworkFileError, match="non-negative"):
            parse_network(["-1 0"])
        with pytest.raises(NetworkFileError, match="non-negative"):
            parse_network(["2 1", "0 -1"])

    def test_error_is_os_error(self):
        """Loader errors belong to the OSError family."""
        with pytest.raises(OSError):
            parse_network([])


class TestReadNetwork:
    """Test reading network files from disk."""

    def test_read_file(self, write_network):
        """Files are parsed and remember their source."""
        path = write_network("3 1\n0 1\n")
        network = read_network(path)
        assert network == NetworkData(3, ((0, 1),), source=path)

    def test_missing_file_raises(self, tmp_path):
        """A missing file is a NetworkFileError."""
        with pytest.raises(NetworkFileError, match="cannot read file"):
            read_network(tmp_path / "nope.txt")

    def test_directory_raises(self, tmp_path):
        """A directory path is a NetworkFileError."""
        with pytest.raises(NetworkFileError):
            read_network(tmp_path)

    def test_undecodable_file_raises(self, tmp_path):
        """Binary garbage is a NetworkFileError."""
        path = tmp_path / "binary.txt"
        path.write_bytes(b"\xff\xfe\x00\x81")
        with pytest.raises(NetworkFileError):
            read_network(path)

    def test_bundled_sample_loads(self, project_root):
        """The sample network shipped in data/ is well formed."""
        graph, network = load_network(project_root / "data" / "network.txt")
        assert graph.size() == network.node_count
        assert all(graph.validate().values())


class TestLoadNetwork:
    """End-to-end scenarios from file to query."""

    def test_chain_scenario(self, write_network):
        """Chain file supports friend lists and connections."""
        graph, _ = load_network(write_network("4 3\n0 1\n1 2\n2 3\n"))
        assert set(graph) == {0, 1, 2, 3}
        assert friends_of(graph, 0) == [1]
        assert friends_of(graph, 1) == [0, 2]
        result = find_connection(graph, 0, 3)
        assert result.status is ConnectionStatus.FOUND
        assert result.path == (0, 1, 2, 3)

    def test_unreachable_scenario(self, write_network):
        """Registered but isolated account has no path."""
        graph, _ = load_network(write_network("3 1\n0 1\n"))
        assert find_connection(graph, 0, 2).status is ConnectionStatus.NO_PATH

    def test_unregistered_scenario(self, write_network):
        """Ids outside the header's range are not found."""
        graph, _ = load_network(write_network("3 1\n0 1\n"))
        assert find_connection(graph, 5, 0).status is ConnectionStatus.NOT_FOUND

    def test_dangling_friendship_skipped(self, write_network, caplog):
        """Friendships naming ids beyond the header are skipped with a warning."""
        graph, network = load_network(write_network("2 2\n0 1\n1 9\n"))
        assert network.edges == ((0, 1), (1, 9))
        assert graph.neighbors(1) == (0,)
        assert graph.dangling_edges == 1
        assert "unregistered" in caplog.text

    def test_dangling_friendships_warned_once(self, write_network, caplog):
        """Skipped friendships produce one summary warning, not one per edge."""
        graph, _ = load_network(write_network("2 3\n1 7\n0 1\n8 0\n"))
        assert graph.dangling_edges == 2
        warnings = [r for r in caplog.records if r.levelno >= logging.WARNING]
        assert len(warnings) == 1
        assert "2 friendship(s)" in warnings[0].getMessage()
