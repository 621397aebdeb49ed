(INBOX, REVIEW, INTERVIEW_1, INTERVIEW_2,
 TEST, HIRED, REJECTED, ARCHIVED) = (
    'inbox', 'review', 'interview-1', 'interview-2',
    'test', 'hired', 'rejected', 'archived'
)

# stages whose id starts with this prefix schedule an interview on entry
INTERVIEW_STAGE_PREFIX = 'interview'

# (slug, title, is_core) in board order, the archive is always last
DEFAULT_STAGES = [
    (INBOX, 'Inbox', True),
    (REVIEW, 'Under Review', False),
    (INTERVIEW_1, 'First Interview', False),
    (INTERVIEW_2, 'Second Interview', False),
    (TEST, 'Test', False),
    (HIRED, 'Hired', True),
    (REJECTED, 'Rejected', True),
    (ARCHIVED, 'Archived', True),
]

EMAIL, WHATSAPP = 'email', 'whatsapp'
TEMPLATE_TYPE_CHOICES = (
    (EMAIL, 'Email'),
    (WHATSAPP, 'WhatsApp'),
)

NOT_SENT, PENDING, SUBMITTED, REVIEW_STATUS, PASSED, FAILED = (
    'not_sent', 'pending', 'submitted', 'review', 'passed', 'failed'
)
TEST_RESULT_STATUS_CHOICES = (
    (NOT_SENT, 'Not Sent'),
    (PENDING, 'Pending'),
    (SUBMITTED, 'Submitted'),
    (REVIEW_STATUS, 'Under Review'),
    (PASSED, 'Passed'),
    (FAILED, 'Failed'),
)
# tests the candidate sees on the portal
PORTAL_TEST_STATUSES = (PENDING, SUBMITTED)

# actor recorded on history written without a logged in user
CANDIDATE_ACTOR = 'candidate'

MIN_RATING, MAX_RATING = 0, 5

DEFAULT_TEST_DEADLINE_HOURS = 48

# Template placeholders
CANDIDATE_NAME = 'candidateName'
POSITION = 'position'
INTERVIEW_DATE = 'interviewDate'
INTERVIEW_TIME = 'interviewTime'
COMPANY_NAME = 'companyName'
COMPANY_ADDRESS = 'companyAddress'
COMPANY_WEBSITE = 'companyWebsite'
STAGE_NAME = 'stageName'

INTERVIEW_DATE_NOT_SET = '[interview date not set]'
INTERVIEW_TIME_NOT_SET = '[interview time not set]'

TEMPLATE_PARAMS = {
    '{{candidateName}}': 'Full name of the candidate.',
    '{{position}}': 'Position the candidate applied for.',
    '{{interviewDate}}': 'Scheduled interview date (YYYY/MM/DD).',
    '{{interviewTime}}': 'Scheduled interview time (HH:MM).',
    '{{companyName}}': 'Company name from the company profile.',
    '{{companyAddress}}': 'Company address from the company profile.',
    '{{companyWebsite}}': 'Company website from the company profile.',
    '{{stageName}}': 'Title of the stage the candidate is moved to.',
}

DEFAULT_SOURCES = [
    'LinkedIn', 'Jobinja', 'e-Estekhdam', 'Company Website', 'Referral', 'Other'
]

DEFAULT_COMPANY_PROFILE = {
    'name': 'Your Company',
    'website': 'https://yourcompany.com',
    'address': 'Your company address',
    'job_positions': [
        {'id': 'job-1', 'title': 'Senior React Developer'},
        {'id': 'job-2', 'title': 'Product Manager'},
        {'id': 'job-3', 'title': 'Digital Marketing Specialist'},
    ],
}

DEFAULT_TEST_LIBRARY = [
    {'id': 'test-1', 'name': 'Archetype Test', 'url': 'https://socianttest.com/archetype/'},
    {'id': 'test-2', 'name': 'MBTI Test', 'url': 'https://socianttest.com/mbti/'},
    {'id': 'test-3', 'name': 'Emotional Intelligence (EQ) Test',
     'url': 'https://socianttest.com/emotional-intelligence-eq/'},
    {'id': 'test-4', 'name': 'Raven IQ Test', 'url': 'https://socianttest.com/raven-intelligence/'},
    {'id': 'test-5', 'name': 'Schema Test', 'url': 'https://socianttest.com/tarhvare/'},
    {'id': 'test-6', 'name': 'DISC Test', 'url': 'https://socianttest.com/disc/'},
]

_EMAIL_FOOTER = '\n\nBest regards,\n{{companyName}} recruitment team\n{{companyWebsite}}'

# (name, type, stage slug, content)
DEFAULT_TEMPLATES = [
    (
        'Job offer email', EMAIL, HIRED,
        'Hello {{candidateName}},\n\nWe are happy to let you know that you have passed '
        'the interviews and we would like to offer you the "{{position}}" position at '
        '{{companyName}}.\n\nWe will contact you soon to arrange the details.' + _EMAIL_FOOTER
    ),
    (
        'Moved to review', EMAIL, REVIEW,
        'Hello {{candidateName}},\n\nYour resume for the "{{position}}" position has been '
        'received and is now at the "{{stageName}}" stage.\n\nWe will let you know the '
        'result soon.' + _EMAIL_FOOTER
    ),
    (
        'First interview invitation', EMAIL, INTERVIEW_1,
        'Hello {{candidateName}},\n\nYour resume for the "{{position}}" position has been '
        'reviewed and we would like to invite you to the "{{stageName}}" stage.\n\n'
        'Your interview is scheduled on {{interviewDate}} at {{interviewTime}} at:\n'
        '{{companyAddress}}\n\nPlease confirm your attendance.' + _EMAIL_FOOTER
    ),
    (
        'Second interview invitation', EMAIL, INTERVIEW_2,
        'Hello {{candidateName}},\n\nThank you for attending the first interview. We would '
        'like to invite you to the next stage, "{{stageName}}".\n\nYour interview is '
        'scheduled on {{interviewDate}} at {{interviewTime}} at:\n{{companyAddress}}\n\n'
        'Please confirm your attendance.' + _EMAIL_FOOTER
    ),
    (
        'WhatsApp job offer', WHATSAPP, None,
        'Hello {{candidateName}}. Congratulations! You have been accepted for the '
        '"{{position}}" position at {{companyName}}. We will contact you soon.'
    ),
    (
        'WhatsApp interview reminder', WHATSAPP, None,
        'Hello {{candidateName}}, this is a reminder that your interview for the '
        '"{{position}}" position is on {{interviewDate}} at {{interviewTime}}.'
    ),
]

# shown on the candidate portal, keyed by stage slug
PORTAL_STAGE_MESSAGES = {
    INBOX: 'Your application has been received and will be reviewed soon.',
    REVIEW: 'Your resume is being reviewed by our team.',
    INTERVIEW_1: 'You have been invited to an interview. Please check your email for details.',
    INTERVIEW_2: 'You have been invited to the next interview. Please check your email for details.',
    TEST: 'Please complete the tests assigned to you below.',
    HIRED: 'Congratulations! You have been hired.',
    REJECTED: 'Thank you for your interest. Unfortunately we will not proceed with your application.',
    ARCHIVED: 'Your application is no longer active.',
}
PORTAL_DEFAULT_STAGE_MESSAGE = 'Your application is in progress.'

# Histories
CANDIDATE_CREATED = 'candidate created'
CANDIDATE_UPDATED = 'details updated'
STAGE_CHANGED = 'stage changed to "{stage}"'
RESTORED_FROM_ARCHIVE = 'restored from archive'
PORTAL_LINK_CREATED = 'candidate portal link created'
TEST_RESULT_UPDATED = 'test result for "{test}" updated'
TESTS_SENT = 'tests sent'
TEST_SUBMITTED = 'test "{test}" submitted by candidate'
INTERVIEW_SCHEDULED = 'interview scheduled on {date} at {time}'
MESSAGE_SENT = '{channel} message prepared'
