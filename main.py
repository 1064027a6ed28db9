"""
Screening Interviewer - command line entry point.

Analyses a resume against a job description, runs a typed interview and
prints the assessment.
"""
import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from talentscreen.errors import AssessmentError, PersistenceError
from talentscreen.interview import InterviewSession, load_report, render_summary, save_report
from talentscreen.models import JobDescription
from talentscreen.persistence import ScoreSubmitter
from talentscreen.utils.logger import setup_logger

logger = setup_logger("cli")


def load_job(path: Path) -> JobDescription:
    with open(path, 'r', encoding='utf-8') as f:
        return JobDescription.from_record(json.load(f))


def confirm(prompt: str) -> bool:
    return input(f"{prompt} (y/n): ").strip().lower() == 'y'


def ask_answer(session: InterviewSession) -> Optional[str]:
    """Prompt until the candidate gives an answer they are happy with; None to quit."""
    while True:
        answer = input("[Your answer]: ").strip()
        if answer.lower() in ['quit', 'exit']:
            return None
        if not answer:
            print("Please provide an answer before proceeding.")
            continue

        check = session.record_answer(answer)
        if check.too_brief and not confirm(
            f"Your answer seems too brief ({check.word_count} words, {check.char_count} chars). "
            "Continue anyway?"
        ):
            continue
        return answer


def conduct_interview(session: InterviewSession, assume_yes: bool = False) -> bool:
    """
    Run the analysis gate and the question loop.

    Returns:
        True when the interview finished, False when it was declined or abandoned
    """
    analysis = session.analyze()
    print(f"\nSkill match: {analysis.percent}% ({analysis.matched_count}/{analysis.total_count})")
    print(f"Matched: {', '.join(analysis.strengths) or 'None'}")
    print(f"Missing: {', '.join(analysis.weaknesses) or 'None'}")

    confirmed = session.auto_proceed
    if not confirmed:
        print(f"Profile not matching enough for this role (need {session.matcher.threshold}%).")
        confirmed = assume_yes or confirm("Would you like to start the interview anyway?")
        if not confirmed:
            return False

    questions = session.start_interview(confirmed=confirmed)
    print(f"\nStarting interview: {len(questions)} questions.")

    while session.current_question is not None:
        print(f"\n[Q{session.current_index + 1} of {len(questions)}] {session.current_question}")
        if ask_answer(session) is None:
            print("\nInterview ended by candidate.")
            return False
        session.next_question()

    return True


def submit(submitter: ScoreSubmitter, score: int) -> bool:
    try:
        submitter.submit_score(score)
    except PersistenceError as e:
        print(f"Error saving result: {e}. The report file can be resubmitted with --resubmit.")
        return False
    print("Interview result saved to database.")
    return True


def main():
    parser = argparse.ArgumentParser(description="Resume screening and automated interview")
    parser.add_argument('--job', type=Path, help='Job description JSON file (title, skills, experience, description)')
    parser.add_argument('--resume', type=Path, help='Resume text file')
    parser.add_argument('--name', type=str, default='', help='Candidate name')
    parser.add_argument('--api-key', type=str, default=None, help='Question service credential')
    parser.add_argument('--yes', action='store_true', help='Start the interview even below the match threshold')
    parser.add_argument('--submit', action='store_true', help='Submit the composite score when done')
    parser.add_argument('--score-url', type=str, default=None, help='Score submission endpoint')
    parser.add_argument('--reports-dir', type=Path, default=None, help='Where to save the JSON report')
    parser.add_argument('--resubmit', type=Path, default=None, help='Resubmit the score from a saved report')
    parser.add_argument('--verbose', action='store_true', help='Trace every skill match decision')

    args = parser.parse_args()
    if args.verbose:
        setup_logger("skill_matcher", "DEBUG")

    submitter = ScoreSubmitter(url=args.score_url) if args.score_url else ScoreSubmitter()

    if args.resubmit:
        report = load_report(args.resubmit)
        sys.exit(0 if submit(submitter, int(report['composite_score'])) else 1)

    if not args.job or not args.resume:
        parser.error("--job and --resume are required")

    job = load_job(args.job)
    resume = args.resume.read_text(encoding='utf-8')
    name = args.name or input("\nEnter candidate name: ").strip()

    session = InterviewSession(job, resume, candidate_name=name, api_key=args.api_key)

    try:
        if not conduct_interview(session, assume_yes=args.yes):
            return
    except KeyboardInterrupt:
        print("\n\nInterview interrupted by user")
        return
    except AssessmentError as e:
        logger.error(f"Interview aborted: {e}")
        print(f"\nError: {e}")
        sys.exit(1)

    print("\n" + "=" * 60)
    print(render_summary(session.result))
    print("=" * 60)

    report_path = save_report(session.result, args.reports_dir)
    print(f"Report saved to: {report_path}")

    if args.submit:
        submit(submitter, session.result.composite_score)


if __name__ == "__main__":
    main()
