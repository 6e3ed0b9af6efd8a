"""Message template functions for MessageFormatter."""

from typing import List

from ..models import APPROVED, CHANGES_REQUESTED, COMMENTED, PullRequest, ReviewEvent, ReviewSummary


def _get_message_templates(self, language: str) -> dict:
    """Get message templates for the specified language."""
    if language == 'korean':
        return {
            'reminder_header': "🍀 리뷰가 필요한 PR 목록 🍀",
            'pr_event_header': "🔔 PR 알림 ({action}) 🔔",
            'pr_title': "[[PR] {title}](<{url}>)",
            'reviewers_label': "리뷰어",
            'no_reviewers': "없음",
            'merge_ready_all_approved': "모든 리뷰어의 승인 완료! 코멘트를 확인 후 머지해 주세요 🚀",
            'merge_ready_approvals_met': "필요한 승인 수를 채웠습니다! 남은 코멘트를 확인 후 머지해 주세요 🚀",
            'merge_ready_no_review_required': "승인이 필요하지 않은 PR입니다. 준비되면 머지해 주세요 🚀",
            'merge_ready_solo': "협업자가 없는 저장소입니다. 준비되면 머지해 주세요 🚀",
            'review_reviewer': "리뷰어: {mention} ({display_name})",
            'review_state': "리뷰 상태: {state}",
            'review_state_approved': "승인 ✅",
            'review_state_changes_requested': "변경 요청 ⚠️",
            'review_state_commented': "코멘트 💬",
            'review_state_unknown': "리뷰 상태 알 수 없음 ❓",
            'review_body_label': "리뷰 내용:",
            'review_body_empty': "상세 리뷰 내용 없음",
            'pending_reviewers': "⏳ 아직 리뷰하지 않은 리뷰어들: {mentions}",
            'pending_nudge': "리뷰를 완료해 주세요! 🔍",
        }
    else:  # english (default)
        return {
            'reminder_header': "🍀 PRs waiting for review 🍀",
            'pr_event_header': "🔔 PR notification ({action}) 🔔",
            'pr_title': "[[PR] {title}](<{url}>)",
            'reviewers_label': "Reviewers",
            'no_reviewers': "none",
            'merge_ready_all_approved': "all reviewers approved! Check the comments and merge 🚀",
            'merge_ready_approvals_met': "required approvals reached! Check the remaining comments and merge 🚀",
            'merge_ready_no_review_required': "no approval is required for this PR. Merge when you are ready 🚀",
            'merge_ready_solo': "there are no collaborators to wait for. Merge when you are ready 🚀",
            'review_reviewer': "Reviewer: {mention} ({display_name})",
            'review_state': "Review state: {state}",
            'review_state_approved': "Approved ✅",
            'review_state_changes_requested': "Changes requested ⚠️",
            'review_state_commented': "Commented 💬",
            'review_state_unknown': "Unknown review state ❓",
            'review_body_label': "Review:",
            'review_body_empty': "No review details",
            'pending_reviewers': "⏳ Reviewers who have not reviewed yet: {mentions}",
            'pending_nudge': "Please finish your review! 🔍",
        }


def _select_merge_phrase(self, summary: ReviewSummary) -> str:
    """Pick the template key of the merge-ready phrase for a mergeable PR."""
    if not summary.has_collaborators:
        return 'merge_ready_solo'
    if summary.approved_count == 0:
        return 'merge_ready_no_review_required'
    if not summary.has_requested_reviewers:
        return 'merge_ready_approvals_met'
    if summary.all_requested_approved:
        return 'merge_ready_all_approved'
    return 'merge_ready_approvals_met'


def format_pr_title(self, pr: PullRequest) -> str:
    return self.templates['pr_title'].format(title=pr.title, url=pr.url)


def format_pr_message(self, pr: PullRequest, summary: ReviewSummary) -> str:
    """Generate the reminder line block for one PR."""
    tags = ", ".join(summary.reviewer_tags) or self.templates['no_reviewers']
    message = f"{self.format_pr_title(pr)}\n{self.templates['reviewers_label']}: {tags}"

    if summary.can_merge:
        phrase = self.templates[self._select_merge_phrase(summary)]
        message += f"\n{self.mentions.mention(pr.author)}, {phrase}"

    return message


def format_review_message(self, pr: PullRequest, review: ReviewEvent, pending_reviewers: List[str]) -> str:
    """Generate the notification for a freshly submitted review."""
    state_keys = {
        APPROVED: 'review_state_approved',
        CHANGES_REQUESTED: 'review_state_changes_requested',
        COMMENTED: 'review_state_commented',
    }
    state_text = self.templates[state_keys.get(review.state, 'review_state_unknown')]
    reviewer_line = self.templates['review_reviewer'].format(
        mention=self.mentions.mention(review.reviewer),
        display_name=self.mentions.display_name(review.reviewer),
    )

    lines = [
        self.format_pr_title(pr),
        reviewer_line,
        self.templates['review_state'].format(state=state_text),
        "",
        self.templates['review_body_label'],
        "```",
        review.body or self.templates['review_body_empty'],
        "```",
    ]

    if pending_reviewers:
        mentions = " ".join(self.mentions.mention(login) for login in pending_reviewers)
        lines.append(self.templates['pending_reviewers'].format(mentions=mentions))
        lines.append(self.templates['pending_nudge'])

    return "\n".join(lines)
