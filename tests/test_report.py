"""Markdown report rendering."""
from jobmatch.matching import calculate_job_match, get_job_recommendations, rank_jobs_by_match
from jobmatch.report import build_report, write_report


def test_report_lists_recommendations_with_reasons(make_job, ideal_preferences):
    job = make_job(title="Software Engineer", company="Tech Corp", remote=True, company_id="42")
    ranked = rank_jobs_by_match([job], ideal_preferences)
    recs = get_job_recommendations([job], ideal_preferences)

    report = build_report(ranked, recs, ideal_preferences)

    assert "## Recommended for you" in report
    assert "### Software Engineer @ Tech Corp" in report
    assert "100% (Excellent match)" in report
    assert "Matches your preferred job titles, Located in your preferred area, Remote work available" in report
    assert "Meets your salary expectations" not in report
    assert "/companies/42-tech-corp" in report
    assert "titles: Software Engineer" in report
    assert "S$5,000–8,000/month" in report


def test_report_without_preferences_hides_badges(make_job):
    jobs = [make_job(company="Acme Pte. Ltd.", salary=None)]
    ranked = [calculate_job_match(j, None) for j in jobs]

    report = build_report(ranked, [], None)

    assert "No saved preferences" in report
    assert "## Recommended for you" not in report
    assert "## All Results" in report
    assert "% (" not in report


def test_report_truncates_long_tables(make_job):
    ranked = [calculate_job_match(make_job(), None) for _ in range(25)]

    report = build_report(ranked, [], None)

    assert "_5 more not shown._" in report


def test_write_report(tmp_path):
    path = write_report("# hello", tmp_path / "out")

    assert path.parent == tmp_path / "out"
    assert path.name.startswith("matches_") and path.suffix == ".md"
    assert path.read_text(encoding="utf-8") == "# hello"
