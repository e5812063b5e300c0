"""
Tests for file discovery and the file-based check.
"""

from conceptcheck.config import CheckProfile
from conceptcheck.discover import find_files, is_spec_file, load_concepts, read_document, run_check


class TestFindFiles:

    def test_recursive_and_sorted(self, project_tree):
        found = find_files(project_tree, "cpt")
        rel = [p.relative_to(project_tree).as_posix() for p in found]
        assert rel == ["concepts/a.cpt", "concepts/nested/b.cpt"]

    def test_leading_dot_accepted(self, project_tree):
        assert find_files(project_tree, ".cpt") == find_files(project_tree, "cpt")

    def test_directories_are_skipped(self, project_tree):
        (project_tree / "fake.cpt").mkdir()
        rel = [p.relative_to(project_tree).as_posix() for p in find_files(project_tree, "cpt")]
        assert "fake.cpt" not in rel

    def test_missing_root(self, tmp_path):
        assert find_files(tmp_path / "missing", "cpt") == []


class TestReadDocument:

    def test_source_is_path(self, project_tree):
        path = project_tree / "concepts" / "a.cpt"
        doc = read_document(path)
        assert doc.source == str(path)
        assert doc.lines[0] == "# open the login page"

    def test_undecodable_bytes_are_replaced(self, tmp_path):
        path = tmp_path / "bad.cpt"
        path.write_bytes(b"# ok\n# \xff\xfe\n")
        doc = read_document(path)
        assert doc.lines[0] == "# ok"
        assert "�" in doc.lines[1]


class TestRunCheck:

    def test_full_run(self, project_tree):
        result = run_check(project_tree / "specs" / "login.spec", project_tree)
        assert [m.step for m in result.matches] == [
            "open the login page",
            "enter credentials",
            "submit the form",
        ]
        assert len(result.concept_sources) == 2

    def test_root_defaults_to_spec_directory(self, project_tree):
        result = run_check(project_tree / "specs" / "login.spec", None)
        assert result.concept_sources == []
        assert result.is_empty
        assert len(result.steps) == 4

    def test_missing_spec_is_noop(self, tmp_path):
        result = run_check(tmp_path / "missing.spec", tmp_path)
        assert result.is_empty
        assert result.steps == []

    def test_non_spec_file_is_noop(self, project_tree):
        result = run_check(project_tree / "concepts" / "readme.txt", project_tree)
        assert result.is_empty
        assert result.steps == []

    def test_profile_controls_locator(self, project_tree):
        prof = CheckProfile(strict_locator=False)
        result = run_check(project_tree / "specs" / "login.spec", project_tree, prof)
        assert result.matches[-1].line == 3

    def test_profile_controls_extensions(self, project_tree):
        prof = CheckProfile(concept_extension="txt")
        assert is_spec_file(project_tree / "specs" / "login.spec", prof)
        docs = load_concepts(project_tree, prof)
        assert [d.lines[0] for d in docs] == ["# open the login page"]
