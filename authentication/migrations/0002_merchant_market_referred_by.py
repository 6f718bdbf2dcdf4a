# Generated manually for authentication app
# Merchant links are added after the marketplace and marketers tables exist.

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    dependencies = [
        ('authentication', '0001_initial'),
        ('marketplace', '0001_initial'),
        ('marketers', '0001_initial'),
    ]

    operations = [
        migrations.AddField(
            model_name='merchant',
            name='market',
            field=models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='merchants', to='marketplace.market'),
        ),
        migrations.AddField(
            model_name='merchant',
            name='referred_by',
            field=models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='referred_merchants', to='marketers.marketer'),
        ),
        migrations.AddIndex(
            model_name='merchant',
            index=models.Index(fields=['market'], name='authenticat_market__21cd54_idx'),
        ),
        migrations.AddIndex(
            model_name='merchant',
            index=models.Index(fields=['referred_by'], name='authenticat_referre_ac77c8_idx'),
        ),
    ]
