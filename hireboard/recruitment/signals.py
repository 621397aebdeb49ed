from django.db.models.signals import post_delete
from django.dispatch import receiver

from hireboard.recruitment.models import Candidate, TestResult


@receiver(post_delete, sender=Candidate)
def delete_candidate_resume(sender, instance, **kwargs):
    if instance.resume:
        instance.resume.delete(save=False)


@receiver(post_delete, sender=TestResult)
def delete_test_result_file(sender, instance, **kwargs):
    if instance.file:
        instance.file.delete(save=False)
