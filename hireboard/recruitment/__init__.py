"""
Recruitment board

Candidates move through an ordered set of stages shown as the columns of a
Kanban board. Entering a stage may prepare an email or WhatsApp message
rendered from the templates bound to that stage, and entering an interview
stage schedules the interview. Every change is written to the append only
history of the candidate.

Candidates can follow their own application through a token protected portal
and submit the results of the tests assigned to them there.
"""
